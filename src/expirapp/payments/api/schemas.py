"""Pydantic request/response schemas for the Payments API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from expirapp.shared.schemas import PageMeta

# --- Payment Schemas ---


class RecordPaymentRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"order_id": "d4e5f6a7-b8c9-0123-def0-123456789abc", "method_id": None, "amount": 12.5}]
        }
    }

    order_id: str
    method_id: str | None = None
    amount: float = Field(..., ge=0)


class UpdatePaymentRequest(BaseModel):
    """Omitted fields stay as they are; an amount of ``0`` is applied."""

    method_id: str | None = None
    amount: float | None = Field(None, ge=0)


class PaymentIdResponse(BaseModel):
    payment_id: str


class PaymentResponse(BaseModel):
    payment_id: str
    order_id: str
    method_id: str | None = None
    amount: float
    paid_at: datetime | None = None


class PaymentListResponse(PageMeta):
    payments: list[PaymentResponse]


class PaymentStatusResponse(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"order_id": "d4e5f6a7", "total": 30.3, "paid": 20.0, "pending": 10.3, "payments": []},
            ]
        }
    }

    order_id: str
    total: float
    paid: float
    pending: float
    payments: list[PaymentResponse]


# --- Payment Method Schemas ---


class PaymentMethodRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Card"}]}}

    name: str = Field(..., min_length=1, max_length=50)


class PaymentMethodIdResponse(BaseModel):
    method_id: str


class PaymentMethodResponse(BaseModel):
    method_id: str
    name: str


class PaymentMethodListResponse(BaseModel):
    methods: list[PaymentMethodResponse]
    total: int
