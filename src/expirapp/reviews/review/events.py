"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, Integer

from expirapp.domain import commerce


@commerce.event(part_of="Review")
class ReviewSubmitted:
    __version__ = 1

    review_id: Identifier(required=True)
    product_id: Identifier(required=True)
    client_id: Identifier(required=True)
    rating: Integer(required=True)
    submitted_at: DateTime(required=True)


@commerce.event(part_of="Review")
class ReviewEdited:
    __version__ = 1

    review_id: Identifier(required=True)
    product_id: Identifier(required=True)
    rating: Integer(required=True)


@commerce.event(part_of="Review")
class ReviewRemoved:
    __version__ = 1

    review_id: Identifier(required=True)
    product_id: Identifier(required=True)
    client_id: Identifier(required=True)
