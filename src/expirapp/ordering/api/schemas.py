"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from expirapp.shared.schemas import PageMeta

# --- Request Schemas ---


class OrderLineRequest(BaseModel):
    product_id: str
    quantity: int = Field(..., ge=1)
    unit_price: float | None = Field(None, ge=0)


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "client_id": "c1d2e3f4-0000-4000-8000-000000000001",
                    "seller_id": "s1d2e3f4-0000-4000-8000-000000000002",
                    "items": [
                        {"product_id": "p1d2e3f4-0000-4000-8000-000000000003", "quantity": 2},
                        {"product_id": "p1d2e3f4-0000-4000-8000-000000000004", "quantity": 1, "unit_price": 4.5},
                    ],
                }
            ]
        }
    }

    client_id: str
    seller_id: str | None = None
    items: list[OrderLineRequest]


class UpdateOrderRequest(BaseModel):
    seller_id: str | None = None


class AddOrderItemRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "p1d2e3f4", "quantity": 3}]}}

    product_id: str
    quantity: int = Field(..., ge=1)
    unit_price: float | None = Field(None, ge=0)


class UpdateOrderItemRequest(BaseModel):
    """Omitted fields stay as they are; a unit price of ``0`` is applied."""

    quantity: int | None = Field(None, ge=1)
    unit_price: float | None = Field(None, ge=0)


# --- Response Schemas ---


class OrderIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"order_id": "d4e5f6a7-b8c9-0123-def0-123456789abc"}]}}

    order_id: str


class OrderItemIdResponse(BaseModel):
    item_id: str


class OrderItemResponse(BaseModel):
    item_id: str
    product_id: str
    quantity: int
    unit_price: float
    subtotal: float


class OrderResponse(BaseModel):
    order_id: str
    client_id: str
    seller_id: str | None = None
    purchase_date: date | None = None
    items: list[OrderItemResponse]
    total: float


class OrderListResponse(PageMeta):
    orders: list[OrderResponse]
