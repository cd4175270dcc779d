"""Queries over live reviews, including the per-product rating summary."""

from dataclasses import dataclass

from protean.exceptions import ObjectNotFoundError

from expirapp.domain import commerce
from expirapp.reviews.review.review import Review
from expirapp.shared.pagination import Page, fetch_all, paginate


@dataclass(frozen=True)
class RatingSummary:
    product_id: str
    average_rating: float
    review_count: int


@commerce.repository(part_of=Review)
class ReviewRepository:
    def _live(self):
        return self._dao.query.filter(is_deleted=False)

    def get_live(self, review_id) -> Review:
        review = self.get(review_id)
        if review.is_deleted:
            raise ObjectNotFoundError(f"`Review` object with identifier `{review_id}` does not exist.")
        return review

    def exists_for(self, client_id, product_id) -> bool:
        """True when the client already has a live review of the product."""
        existing = self._live().filter(client_id=str(client_id), product_id=str(product_id)).all()
        return existing.total > 0

    def list_page(self, page: int | None = None, limit: int | None = None) -> Page:
        return paginate(self._live().order_by("-created_at"), page, limit)

    def list_by_product(self, product_id, page: int | None = None, limit: int | None = None) -> Page:
        return paginate(self._live().filter(product_id=str(product_id)).order_by("-created_at"), page, limit)

    def rating_summary(self, product_id) -> RatingSummary:
        """Average rating rounded to 2 decimals (0 without reviews) and review count."""
        ratings = [r.rating for r in fetch_all(self._live().filter(product_id=str(product_id)))]
        average = round(sum(ratings) / len(ratings), 2) if ratings else 0.0
        return RatingSummary(product_id=str(product_id), average_rating=average, review_count=len(ratings))
