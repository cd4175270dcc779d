"""EditReview and RemoveReview: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from expirapp.domain import commerce
from expirapp.reviews.review.review import Review


@commerce.command(part_of="Review")
class EditReview:
    """Change the rating or comment of a live review."""

    review_id = Identifier(required=True)
    rating = Integer()
    comment = String(max_length=500)


@commerce.command(part_of="Review")
class RemoveReview:
    """Soft-delete a review so the client may review the product again."""

    review_id = Identifier(required=True)


@commerce.command_handler(part_of=Review)
class ManageReviewHandler:
    @handle(EditReview)
    def edit_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get_live(command.review_id)

        kwargs = {}
        if command.rating is not None:
            kwargs["rating"] = command.rating
        if command.comment is not None:
            kwargs["comment"] = command.comment

        review.edit(**kwargs)
        repo.add(review)

    @handle(RemoveReview)
    def remove_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get_live(command.review_id)
        review.remove()
        repo.add(review)
