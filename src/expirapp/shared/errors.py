"""Business errors raised by the commerce contexts.

Every business rule failure is a protean ``ValidationError`` subclass, so
protean's FastAPI integration answers it with HTTP 400 and the payload keeps
the ``{field: [messages]}`` shape. Missing or soft-deleted records raise
protean's ``ObjectNotFoundError`` (HTTP 404) directly.
"""

from protean.exceptions import ObjectNotFoundError, ValidationError

__all__ = [
    "DuplicateEmailError",
    "DuplicatePaymentMethodError",
    "DuplicateReviewError",
    "InsufficientStockError",
    "ItemOrderMismatchError",
    "ObjectNotFoundError",
    "OverPaymentError",
    "ValidationError",
]


class InsufficientStockError(ValidationError):
    """A product holds fewer units than an operation needs."""


class OverPaymentError(ValidationError):
    """A payment would push the amount paid above the order total."""


class DuplicateReviewError(ValidationError):
    """The client already has a live review for the product."""


class ItemOrderMismatchError(ValidationError):
    """The line item exists but belongs to a different order."""


class DuplicatePaymentMethodError(ValidationError):
    """Another payment method already uses the name."""


class DuplicateEmailError(ValidationError):
    """Another live user already uses the e-mail address."""
