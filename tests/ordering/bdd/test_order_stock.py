"""BDD scenarios for order and stock consistency."""

import json
from datetime import date, timedelta

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, scenarios, then, when

from expirapp.catalogue.product.creation import AddProduct
from expirapp.catalogue.product.product import Product
from expirapp.ordering.order.items import UpdateOrderItem
from expirapp.ordering.order.management import DeleteOrder
from expirapp.ordering.order.order import Order
from expirapp.ordering.order.placement import PlaceOrder
from expirapp.shared.errors import InsufficientStockError

scenarios("features/order_stock.feature")


@pytest.fixture()
def products():
    """Product ids keyed by their scenario name."""
    return {}


@pytest.fixture()
def outcome():
    return {"order_id": None, "exc": None}


def _place(products, p_qty, p_name, q_qty, q_name):
    items = [
        {"product_id": products[p_name], "quantity": p_qty},
        {"product_id": products[q_name], "quantity": q_qty},
    ]
    command = PlaceOrder(client_id="client-bdd", items=json.dumps(items))
    return current_domain.process(command, asynchronous=False)


def _item_for(order_id, product_id):
    order = current_domain.repository_for(Order).get(order_id)
    return next(item for item in order.items if str(item.product_id) == product_id)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a product "{name}" with {stock:d} units in stock'))
def _(products, name, stock):
    command = AddProduct(
        name=name,
        price=1.0,
        expiration_date=date.today() + timedelta(days=30),
        stock=stock,
    )
    products[name] = current_domain.process(command, asynchronous=False)


@given(parsers.cfparse('an order for {p_qty:d} of "{p_name}" and {q_qty:d} of "{q_name}"'))
def _(products, outcome, p_qty, p_name, q_qty, q_name):
    outcome["order_id"] = _place(products, p_qty, p_name, q_qty, q_name)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('an order is placed for {p_qty:d} of "{p_name}" and {q_qty:d} of "{q_name}"'))
def _(products, outcome, p_qty, p_name, q_qty, q_name):
    try:
        outcome["order_id"] = _place(products, p_qty, p_name, q_qty, q_name)
    except InsufficientStockError as exc:
        outcome["exc"] = exc


@when(parsers.cfparse('the "{name}" item quantity is changed to {quantity:d}'))
def _(products, outcome, name, quantity):
    item = _item_for(outcome["order_id"], products[name])
    try:
        current_domain.process(
            UpdateOrderItem(order_id=outcome["order_id"], item_id=item.id, quantity=quantity),
            asynchronous=False,
        )
    except InsufficientStockError as exc:
        outcome["exc"] = exc


@when("the order is deleted")
def _(outcome):
    current_domain.process(DeleteOrder(order_id=outcome["order_id"]), asynchronous=False)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the order is placed")
def _(outcome):
    assert outcome["exc"] is None
    assert current_domain.repository_for(Order).get_live(outcome["order_id"]) is not None


@then("the order is rejected for insufficient stock")
def _(outcome):
    assert isinstance(outcome["exc"], InsufficientStockError)


@then(parsers.cfparse('"{name}" has {stock:d} units in stock'))
def _(products, name, stock):
    assert current_domain.repository_for(Product).get(products[name]).stock == stock


@then(parsers.cfparse('the "{name}" item quantity is {quantity:d}'))
def _(products, outcome, name, quantity):
    assert _item_for(outcome["order_id"], products[name]).quantity == quantity


@then("no order exists")
def _():
    assert current_domain.repository_for(Order).list_page().total == 0
