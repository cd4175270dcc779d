"""Payment aggregate: an amount paid against an order."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Float, Identifier

from expirapp.domain import commerce
from expirapp.payments.payment.events import PaymentRecorded, PaymentUpdated, PaymentVoided

_UNSET = object()


@commerce.aggregate
class Payment:
    order_id = Identifier(required=True)
    method_id = Identifier()
    amount = Float(required=True, min_value=0.0)
    paid_at = DateTime()
    is_deleted = Boolean(default=False)
    deleted_at = DateTime()

    @classmethod
    def record(cls, order_id, amount, method_id=None):
        now = datetime.now(UTC)
        payment = cls(order_id=order_id, method_id=method_id, amount=amount, paid_at=now)
        payment.raise_(
            PaymentRecorded(
                payment_id=payment.id,
                order_id=order_id,
                method_id=method_id,
                amount=amount,
                paid_at=now,
            )
        )
        return payment

    def revise(self, amount=_UNSET, method_id=_UNSET):
        previous_amount = self.amount
        if amount is not _UNSET:
            self.amount = amount
        if method_id is not _UNSET:
            self.method_id = method_id

        self.raise_(
            PaymentUpdated(
                payment_id=self.id,
                order_id=self.order_id,
                method_id=self.method_id,
                previous_amount=previous_amount,
                amount=self.amount,
            )
        )

    def void(self):
        self.is_deleted = True
        self.deleted_at = datetime.now(UTC)
        self.raise_(PaymentVoided(payment_id=self.id, order_id=self.order_id, amount=self.amount))
