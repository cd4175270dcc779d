"""Commerce domain: composition root for the ExpirApp backend.

One protean domain hosts the catalogue, ordering, payments, reviews and
identity contexts, so a single Unit of Work can cover an order together with
the products whose stock it consumes. Elements are registered through
``expirapp.bootstrap``.
"""

from protean.domain import Domain

from expirapp.utils.logging import configure_logging

configure_logging()

commerce = Domain(name="commerce")
