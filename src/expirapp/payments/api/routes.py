"""FastAPI endpoints for the Payments context."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from expirapp.payments.api.schemas import (
    PaymentIdResponse,
    PaymentListResponse,
    PaymentMethodIdResponse,
    PaymentMethodListResponse,
    PaymentMethodRequest,
    PaymentMethodResponse,
    PaymentResponse,
    PaymentStatusResponse,
    RecordPaymentRequest,
    UpdatePaymentRequest,
)
from expirapp.payments.method.management import CreatePaymentMethod, DeletePaymentMethod, RenamePaymentMethod
from expirapp.payments.method.method import PaymentMethod
from expirapp.payments.payment.payment import Payment
from expirapp.payments.payment.recording import RecordPayment, UpdatePayment, VoidPayment
from expirapp.payments.payment.status import payment_status
from expirapp.shared.schemas import StatusResponse

payment_router = APIRouter(prefix="/payments", tags=["payments"])
method_router = APIRouter(prefix="/payment-methods", tags=["payment-methods"])


def _payment_response(payment) -> PaymentResponse:
    return PaymentResponse(
        payment_id=str(payment.id),
        order_id=str(payment.order_id),
        method_id=str(payment.method_id) if payment.method_id else None,
        amount=payment.amount,
        paid_at=payment.paid_at,
    )


def _method_response(method) -> PaymentMethodResponse:
    return PaymentMethodResponse(method_id=str(method.id), name=method.name)


# --- Payment endpoints ---


@payment_router.post("", status_code=201, response_model=PaymentIdResponse)
async def record_payment(body: RecordPaymentRequest) -> PaymentIdResponse:
    command = RecordPayment(order_id=body.order_id, method_id=body.method_id, amount=body.amount)
    result = current_domain.process(command, asynchronous=False)
    return PaymentIdResponse(payment_id=result)


@payment_router.get("", response_model=PaymentListResponse)
async def list_payments(page: int = 1, limit: int = 10) -> PaymentListResponse:
    result = current_domain.repository_for(Payment).list_page(page, limit)
    return PaymentListResponse(
        payments=[_payment_response(p) for p in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
    )


@payment_router.get("/by-order/{order_id}", response_model=PaymentStatusResponse)
async def get_order_payment_status(order_id: str) -> PaymentStatusResponse:
    status = payment_status(order_id)
    return PaymentStatusResponse(
        order_id=status.order_id,
        total=status.total,
        paid=status.paid,
        pending=status.pending,
        payments=[_payment_response(p) for p in status.payments],
    )


@payment_router.get("/{payment_id}", response_model=PaymentResponse)
async def get_payment(payment_id: str) -> PaymentResponse:
    return _payment_response(current_domain.repository_for(Payment).get_live(payment_id))


@payment_router.patch("/{payment_id}", response_model=StatusResponse)
async def update_payment(payment_id: str, body: UpdatePaymentRequest) -> StatusResponse:
    command = UpdatePayment(payment_id=payment_id, method_id=body.method_id, amount=body.amount)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@payment_router.delete("/{payment_id}", response_model=StatusResponse)
async def void_payment(payment_id: str) -> StatusResponse:
    current_domain.process(VoidPayment(payment_id=payment_id), asynchronous=False)
    return StatusResponse()


# --- Payment method endpoints ---


@method_router.post("", status_code=201, response_model=PaymentMethodIdResponse)
async def create_payment_method(body: PaymentMethodRequest) -> PaymentMethodIdResponse:
    result = current_domain.process(CreatePaymentMethod(name=body.name), asynchronous=False)
    return PaymentMethodIdResponse(method_id=result)


@method_router.get("", response_model=PaymentMethodListResponse)
async def list_payment_methods() -> PaymentMethodListResponse:
    methods = current_domain.repository_for(PaymentMethod).list_all()
    return PaymentMethodListResponse(methods=[_method_response(m) for m in methods], total=len(methods))


@method_router.get("/{method_id}", response_model=PaymentMethodResponse)
async def get_payment_method(method_id: str) -> PaymentMethodResponse:
    return _method_response(current_domain.repository_for(PaymentMethod).get(method_id))


@method_router.put("/{method_id}", response_model=StatusResponse)
async def rename_payment_method(method_id: str, body: PaymentMethodRequest) -> StatusResponse:
    current_domain.process(RenamePaymentMethod(method_id=method_id, name=body.name), asynchronous=False)
    return StatusResponse()


@method_router.delete("/{method_id}", response_model=StatusResponse)
async def delete_payment_method(method_id: str) -> StatusResponse:
    current_domain.process(DeletePaymentMethod(method_id=method_id), asynchronous=False)
    return StatusResponse()
