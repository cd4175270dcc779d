"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, Field

from expirapp.shared.schemas import PageMeta

# --- Product Request Schemas ---


class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Greek Yogurt 500g",
                    "description": "Plain, full fat.",
                    "price": 3.49,
                    "expiration_date": "2026-11-02",
                    "stock": 40,
                }
            ]
        }
    }

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None
    price: float = Field(..., ge=0)
    expiration_date: date
    stock: int = Field(0, ge=0)


class UpdateProductRequest(BaseModel):
    """Partial update. Omitted or null fields stay as they are; ``0`` is applied."""

    model_config = {"json_schema_extra": {"examples": [{"price": 2.99, "stock": 0}]}}

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    expiration_date: date | None = None
    stock: int | None = Field(None, ge=0)


class AdjustStockRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"delta": -5}]}}

    delta: int


# --- Product Response Schemas ---


class ProductIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901"}]}}

    product_id: str


class ProductResponse(BaseModel):
    product_id: str
    name: str
    description: str | None = None
    price: float
    expiration_date: date
    stock: int
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductListResponse(PageMeta):
    products: list[ProductResponse]


class ProductCollectionResponse(BaseModel):
    products: list[ProductResponse]


class StockResponse(BaseModel):
    product_id: str
    stock: int
