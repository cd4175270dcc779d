"""Recording, revising and voiding payments: commands and handler.

The amount paid against an order never exceeds the order total. Both the
check and the write run in the handler's unit of work.
"""

import structlog
from protean import handle
from protean.fields import Float, Identifier
from protean.utils.globals import current_domain

from expirapp.domain import commerce
from expirapp.ordering.order.order import Order
from expirapp.payments.method.method import PaymentMethod
from expirapp.payments.payment.payment import Payment
from expirapp.shared.errors import OverPaymentError
from expirapp.shared.money import from_cents, to_cents

logger = structlog.get_logger(__name__)


@commerce.command(part_of="Payment")
class RecordPayment:
    """Record a payment of at most the order's pending amount."""

    order_id = Identifier(required=True)
    method_id = Identifier()
    amount = Float(required=True, min_value=0.0)


@commerce.command(part_of="Payment")
class UpdatePayment:
    """Change a payment's amount or method without exceeding the order total."""

    payment_id = Identifier(required=True)
    method_id = Identifier()
    amount = Float(min_value=0.0)


@commerce.command(part_of="Payment")
class VoidPayment:
    """Void a payment so it no longer counts towards the order."""

    payment_id = Identifier(required=True)


@commerce.command_handler(part_of=Payment)
class RecordPaymentHandler:
    @handle(RecordPayment)
    def record_payment(self, command):
        order = current_domain.repository_for(Order).get_live(command.order_id)
        repo = current_domain.repository_for(Payment)

        pending = order.total_cents - repo.paid_cents(order.id)
        if to_cents(command.amount) > pending:
            raise OverPaymentError(
                {
                    "amount": [
                        f"Amount {command.amount:.2f} exceeds the pending balance {from_cents(max(0, pending)):.2f}"
                    ]
                }
            )

        if command.method_id is not None:
            current_domain.repository_for(PaymentMethod).get(command.method_id)

        payment = Payment.record(order_id=order.id, amount=command.amount, method_id=command.method_id)
        repo.add(payment)

        logger.info("Payment recorded", payment_id=str(payment.id), order_id=str(order.id), amount=command.amount)
        return str(payment.id)

    @handle(UpdatePayment)
    def update_payment(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get_live(command.payment_id)

        changes = {}
        if command.amount is not None:
            order = current_domain.repository_for(Order).get_live(payment.order_id)
            new_paid = repo.paid_cents(order.id) - to_cents(payment.amount) + to_cents(command.amount)
            if new_paid > order.total_cents:
                raise OverPaymentError(
                    {
                        "amount": [
                            f"New amount would bring the paid total to {from_cents(new_paid):.2f}, "
                            f"above the order total {order.total:.2f}"
                        ]
                    }
                )
            changes["amount"] = command.amount

        if command.method_id is not None:
            current_domain.repository_for(PaymentMethod).get(command.method_id)
            changes["method_id"] = command.method_id

        payment.revise(**changes)
        repo.add(payment)

    @handle(VoidPayment)
    def void_payment(self, command):
        repo = current_domain.repository_for(Payment)
        payment = repo.get_live(command.payment_id)
        payment.void()
        repo.add(payment)
