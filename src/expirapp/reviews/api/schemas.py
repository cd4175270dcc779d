"""Pydantic request/response schemas for the Reviews API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from expirapp.shared.schemas import PageMeta


class SubmitReviewRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                    "client_id": "c1d2e3f4-0000-4000-8000-000000000001",
                    "rating": 4,
                    "comment": "Fresh and well packed.",
                }
            ]
        }
    }

    product_id: str
    client_id: str
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = Field(None, max_length=500)


class EditReviewRequest(BaseModel):
    rating: int | None = Field(None, ge=1, le=5)
    comment: str | None = Field(None, max_length=500)


class ReviewIdResponse(BaseModel):
    review_id: str


class ReviewResponse(BaseModel):
    review_id: str
    product_id: str
    client_id: str
    rating: int
    comment: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReviewListResponse(PageMeta):
    reviews: list[ReviewResponse]


class RatingSummaryResponse(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"product_id": "b2c3d4e5", "average_rating": 4.0, "review_count": 3}]}
    }

    product_id: str
    average_rating: float
    review_count: int
