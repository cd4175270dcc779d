"""FastAPI endpoints for the Reviews context."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from expirapp.reviews.api.schemas import (
    EditReviewRequest,
    RatingSummaryResponse,
    ReviewIdResponse,
    ReviewListResponse,
    ReviewResponse,
    SubmitReviewRequest,
)
from expirapp.reviews.review.editing import EditReview, RemoveReview
from expirapp.reviews.review.review import Review
from expirapp.reviews.review.submission import SubmitReview
from expirapp.shared.schemas import StatusResponse

router = APIRouter(prefix="/reviews", tags=["reviews"])


def _review_response(review) -> ReviewResponse:
    return ReviewResponse(
        review_id=str(review.id),
        product_id=str(review.product_id),
        client_id=str(review.client_id),
        rating=review.rating,
        comment=review.comment,
        created_at=review.created_at,
        updated_at=review.updated_at,
    )


def _review_list(result) -> ReviewListResponse:
    return ReviewListResponse(
        reviews=[_review_response(r) for r in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
    )


@router.post("", status_code=201, response_model=ReviewIdResponse)
async def submit_review(body: SubmitReviewRequest) -> ReviewIdResponse:
    command = SubmitReview(
        product_id=body.product_id,
        client_id=body.client_id,
        rating=body.rating,
        comment=body.comment,
    )
    result = current_domain.process(command, asynchronous=False)
    return ReviewIdResponse(review_id=result)


@router.get("", response_model=ReviewListResponse)
async def list_reviews(page: int = 1, limit: int = 10) -> ReviewListResponse:
    return _review_list(current_domain.repository_for(Review).list_page(page, limit))


@router.get("/by-product/{product_id}", response_model=ReviewListResponse)
async def list_product_reviews(product_id: str, page: int = 1, limit: int = 10) -> ReviewListResponse:
    return _review_list(current_domain.repository_for(Review).list_by_product(product_id, page, limit))


@router.get("/by-product/{product_id}/summary", response_model=RatingSummaryResponse)
async def get_rating_summary(product_id: str) -> RatingSummaryResponse:
    summary = current_domain.repository_for(Review).rating_summary(product_id)
    return RatingSummaryResponse(
        product_id=summary.product_id,
        average_rating=summary.average_rating,
        review_count=summary.review_count,
    )


@router.get("/{review_id}", response_model=ReviewResponse)
async def get_review(review_id: str) -> ReviewResponse:
    return _review_response(current_domain.repository_for(Review).get_live(review_id))


@router.patch("/{review_id}", response_model=StatusResponse)
async def edit_review(review_id: str, body: EditReviewRequest) -> StatusResponse:
    command = EditReview(review_id=review_id, rating=body.rating, comment=body.comment)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@router.delete("/{review_id}", response_model=StatusResponse)
async def remove_review(review_id: str) -> StatusResponse:
    current_domain.process(RemoveReview(review_id=review_id), asynchronous=False)
    return StatusResponse()
