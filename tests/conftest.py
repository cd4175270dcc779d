import os
from datetime import date, timedelta
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Select the config overlay before any test module imports the domain."""
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)


@pytest.fixture(scope="session")
def _commerce_domain():
    """Initialize the commerce domain once per session."""
    from expirapp.bootstrap import init_domain

    return init_domain()


@pytest.fixture(scope="session", autouse=True)
def setup_db(_commerce_domain):
    from expirapp.utils.db import drop_db, setup_db

    setup_db(_commerce_domain)

    yield

    drop_db(_commerce_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_commerce_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _commerce_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


@pytest.fixture()
def add_product():
    """Factory that adds a product through the AddProduct command and returns its id."""
    from protean import current_domain

    from expirapp.catalogue.product.creation import AddProduct

    def _add(name="Greek Yogurt", price=3.5, stock=10, expiration_date=None, description=None):
        command = AddProduct(
            name=name,
            description=description,
            price=price,
            expiration_date=expiration_date or date.today() + timedelta(days=30),
            stock=stock,
        )
        return current_domain.process(command, asynchronous=False)

    return _add


@pytest.fixture()
def stock_of():
    """Current stock of a product, read fresh from the repository."""
    from protean import current_domain

    from expirapp.catalogue.product.product import Product

    def _stock(product_id):
        return current_domain.repository_for(Product).get(product_id).stock

    return _stock


@pytest.fixture()
def place_order():
    """Factory that places an order from ``(product_id, quantity[, unit_price])`` tuples."""
    import json

    from protean import current_domain

    from expirapp.ordering.order.placement import PlaceOrder

    def _place(lines, client_id="client-001", seller_id=None):
        items = []
        for line in lines:
            item = {"product_id": line[0], "quantity": line[1]}
            if len(line) > 2:
                item["unit_price"] = line[2]
            items.append(item)
        command = PlaceOrder(client_id=client_id, seller_id=seller_id, items=json.dumps(items))
        return current_domain.process(command, asynchronous=False)

    return _place
