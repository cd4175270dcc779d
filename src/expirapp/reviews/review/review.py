"""Review aggregate: one client's rating and comment on one product."""

from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer, String

from expirapp.domain import commerce
from expirapp.reviews.review.events import ReviewEdited, ReviewRemoved, ReviewSubmitted

# Sentinel for distinguishing "not provided" from None in partial updates
_UNSET = object()


@commerce.aggregate
class Review:
    product_id = Identifier(required=True)
    client_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = String(max_length=500)
    is_deleted = Boolean(default=False)
    deleted_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def rating_must_be_in_range(self):
        if self.rating is not None and (self.rating < 1 or self.rating > 5):
            raise ValidationError({"rating": ["Rating must be between 1 and 5"]})

    @classmethod
    def submit(cls, product_id, client_id, rating, comment=None):
        now = datetime.now(UTC)
        review = cls(
            product_id=product_id,
            client_id=client_id,
            rating=rating,
            comment=comment,
            created_at=now,
            updated_at=now,
        )
        review.raise_(
            ReviewSubmitted(
                review_id=review.id,
                product_id=product_id,
                client_id=client_id,
                rating=rating,
                submitted_at=now,
            )
        )
        return review

    def edit(self, rating=_UNSET, comment=_UNSET):
        if rating is not _UNSET:
            self.rating = rating
        if comment is not _UNSET:
            self.comment = comment
        self.updated_at = datetime.now(UTC)

        self.raise_(ReviewEdited(review_id=self.id, product_id=self.product_id, rating=self.rating))

    def remove(self):
        now = datetime.now(UTC)
        self.is_deleted = True
        self.deleted_at = now
        self.updated_at = now

        self.raise_(ReviewRemoved(review_id=self.id, product_id=self.product_id, client_id=self.client_id))
