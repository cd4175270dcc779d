import pytest
from protean.exceptions import ValidationError

from expirapp.ordering.order.events import (
    OrderDeleted,
    OrderItemAdded,
    OrderItemChanged,
    OrderItemRemoved,
    OrderPlaced,
)
from expirapp.ordering.order.order import Order, OrderItem


def _order(lines=None, **overrides):
    return Order.place(
        client_id=overrides.get("client_id", "client-001"),
        seller_id=overrides.get("seller_id"),
        lines=lines if lines is not None else [("prod-a", 2, 10.0), ("prod-b", 1, 4.5)],
    )


class TestOrderPlacement:
    def test_place_creates_items(self):
        order = _order()
        assert len(order.items) == 2
        assert order.purchase_date is not None
        assert order.is_deleted is False

    def test_place_raises_order_placed(self):
        order = _order()
        event = order._events[-1]
        assert isinstance(event, OrderPlaced)
        assert event.item_count == 2
        assert event.total == 24.5

    def test_empty_order_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _order(lines=[])
        assert "items" in exc.value.messages

    def test_line_items_keep_insertion_order(self):
        order = _order(lines=[("first", 1, 1.0), ("second", 1, 1.0), ("third", 1, 1.0)])
        assert [item.product_id for item in order.line_items()] == ["first", "second", "third"]


class TestOrderTotals:
    def test_subtotal_is_quantity_times_price(self):
        item = OrderItem(product_id="p", quantity=3, unit_price=2.5)
        assert item.subtotal == 7.5

    def test_total_is_sum_of_subtotals(self):
        assert _order().total == 24.5

    def test_total_is_exact_in_cents(self):
        order = _order(lines=[("p", 3, 10.10)])
        assert order.total == 30.30
        assert order.total_cents == 3030


class TestOrderItems:
    def test_add_item(self):
        order = _order()
        item = order.add_item("prod-c", 4, 1.0)
        assert order.find_item(item.id) == item
        assert order.total == 28.5
        assert isinstance(order._events[-1], OrderItemAdded)

    def test_change_item_quantity_and_price(self):
        order = _order()
        item = order.line_items()[0]
        order.change_item(item.id, quantity=5, unit_price=0.0)
        assert item.quantity == 5
        assert item.unit_price == 0.0

        event = order._events[-1]
        assert isinstance(event, OrderItemChanged)
        assert event.previous_quantity == 2
        assert event.quantity == 5

    def test_change_unknown_item(self):
        with pytest.raises(ValidationError):
            _order().change_item("nope", quantity=2)

    def test_item_quantity_must_be_positive(self):
        order = _order()
        item = order.line_items()[0]
        with pytest.raises(ValidationError):
            order.change_item(item.id, quantity=0)

    def test_remove_item(self):
        order = _order()
        item = order.line_items()[0]
        order.remove_item(item.id)
        assert order.find_item(item.id) is None
        assert order.total == 4.5
        assert isinstance(order._events[-1], OrderItemRemoved)


class TestOrderLifecycle:
    def test_reassign_seller(self):
        order = _order(seller_id="seller-1")
        order.reassign_seller("seller-2")
        assert order.seller_id == "seller-2"

    def test_discard_drops_items_and_marks_deleted(self):
        order = _order()
        order.discard()
        assert order.is_deleted is True
        assert len(order.items) == 0

        event = order._events[-1]
        assert isinstance(event, OrderDeleted)
        assert event.released_items == 2
