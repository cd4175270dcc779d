"""Element registration for the commerce domain.

protean's traversal only walks one folder below ``domain.py``, while the
aggregates, commands, handlers and repositories live a level deeper in each
context. They are imported here, before ``commerce.init()``.
"""

import importlib

from expirapp.domain import commerce

ELEMENT_MODULES = (
    # Catalogue
    "expirapp.catalogue.product.events",
    "expirapp.catalogue.product.product",
    "expirapp.catalogue.product.repository",
    "expirapp.catalogue.product.creation",
    "expirapp.catalogue.product.details",
    "expirapp.catalogue.product.stock",
    # Ordering
    "expirapp.ordering.order.events",
    "expirapp.ordering.order.order",
    "expirapp.ordering.order.repository",
    "expirapp.ordering.order.placement",
    "expirapp.ordering.order.items",
    "expirapp.ordering.order.management",
    # Payments
    "expirapp.payments.method.method",
    "expirapp.payments.method.repository",
    "expirapp.payments.method.management",
    "expirapp.payments.payment.events",
    "expirapp.payments.payment.payment",
    "expirapp.payments.payment.repository",
    "expirapp.payments.payment.recording",
    # Reviews
    "expirapp.reviews.review.events",
    "expirapp.reviews.review.review",
    "expirapp.reviews.review.repository",
    "expirapp.reviews.review.submission",
    "expirapp.reviews.review.editing",
    # Identity
    "expirapp.identity.user.events",
    "expirapp.identity.user.user",
    "expirapp.identity.user.repository",
    "expirapp.identity.user.registration",
)


def register_elements() -> None:
    for module in ELEMENT_MODULES:
        importlib.import_module(module)


def init_domain():
    """Register every element with ``commerce`` and initialize it."""
    register_elements()
    commerce.init()
    return commerce
