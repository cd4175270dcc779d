"""Stock checks and movements that order operations run against products.

Everything here runs inside the calling command handler's unit of work, so
stock changes commit or roll back together with the order change.
"""

from collections import defaultdict

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from expirapp.catalogue.product.product import Product

logger = structlog.get_logger(__name__)


def demand_by_product(lines):
    """Sum requested quantities per product across ``(product_id, quantity, ...)`` lines."""
    demand = defaultdict(int)
    for product_id, quantity, *_ in lines:
        demand[str(product_id)] += quantity
    return dict(demand)


def check_availability(demand):
    """Load every product in ``demand`` and verify it covers the summed quantity.

    Returns the loaded products keyed by id. Nothing is modified, so a
    failure on any product leaves all stock untouched.
    """
    repo = current_domain.repository_for(Product)
    products = {}
    for product_id, quantity in demand.items():
        product = repo.get_live(product_id)
        product.ensure_available(quantity)
        products[product_id] = product
    return products


def consume(products, demand):
    repo = current_domain.repository_for(Product)
    for product_id, quantity in demand.items():
        product = products[product_id]
        product.consume(quantity)
        repo.add(product)


def restore(product_id, quantity):
    repo = current_domain.repository_for(Product)
    product = repo.get_live(product_id)
    product.restock(quantity)
    repo.add(product)
    return product


def release_items(order):
    """Give back the stock held by the line items of ``order``, one restock per product.

    A product that no longer resolves is logged and skipped; the remaining
    products are still restocked. Returns the number of products restocked.
    """
    released = demand_by_product((item.product_id, item.quantity) for item in order.line_items())

    restored = 0
    for product_id, quantity in released.items():
        try:
            restore(product_id, quantity)
        except ObjectNotFoundError:
            logger.warning(
                "Could not restore stock for deleted order",
                order_id=str(order.id),
                product_id=product_id,
                quantity=quantity,
            )
            continue
        restored += 1
    return restored
