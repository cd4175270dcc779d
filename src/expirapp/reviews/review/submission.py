"""SubmitReview: submit a new product review.

One live review per client and product. The check needs a repository query
across Review instances, so it is enforced here rather than in the aggregate.
A removed review no longer counts.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from expirapp.catalogue.product.product import Product
from expirapp.domain import commerce
from expirapp.reviews.review.review import Review
from expirapp.shared.errors import DuplicateReviewError

logger = structlog.get_logger(__name__)


@commerce.command(part_of="Review")
class SubmitReview:
    """Rate a product from 1 to 5, once per client while the review is live."""

    product_id = Identifier(required=True)
    client_id = Identifier(required=True)
    rating = Integer(required=True)
    comment = String(max_length=500)


@commerce.command_handler(part_of=Review)
class SubmitReviewHandler:
    @handle(SubmitReview)
    def submit_review(self, command):
        current_domain.repository_for(Product).get_live(command.product_id)

        repo = current_domain.repository_for(Review)
        if repo.exists_for(command.client_id, command.product_id):
            raise DuplicateReviewError({"review": ["This client has already reviewed this product"]})

        review = Review.submit(
            product_id=command.product_id,
            client_id=command.client_id,
            rating=command.rating,
            comment=command.comment,
        )
        repo.add(review)

        logger.info(
            "Review submitted",
            review_id=str(review.id),
            product_id=str(command.product_id),
            rating=command.rating,
        )
        return str(review.id)
