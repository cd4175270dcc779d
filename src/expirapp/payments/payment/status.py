"""Payment status of an order: total, paid and pending amounts."""

from dataclasses import dataclass, field

from protean.utils.globals import current_domain

from expirapp.ordering.order.order import Order
from expirapp.payments.payment.payment import Payment
from expirapp.shared.money import from_cents, sum_cents


@dataclass(frozen=True)
class PaymentStatus:
    order_id: str
    total: float
    paid: float
    pending: float
    payments: list = field(default_factory=list)


def payment_status(order_id) -> PaymentStatus:
    """Pending is ``total - paid`` floored at zero."""
    order = current_domain.repository_for(Order).get_live(order_id)
    payments = current_domain.repository_for(Payment).for_order(order.id)

    total = order.total_cents
    paid = sum_cents(p.amount for p in payments)
    return PaymentStatus(
        order_id=str(order.id),
        total=from_cents(total),
        paid=from_cents(paid),
        pending=from_cents(max(0, total - paid)),
        payments=payments,
    )
