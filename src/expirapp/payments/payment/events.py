"""Domain events for the Payment aggregate."""

from protean.fields import DateTime, Float, Identifier

from expirapp.domain import commerce


@commerce.event(part_of="Payment")
class PaymentRecorded:
    __version__ = 1

    payment_id: Identifier(required=True)
    order_id: Identifier(required=True)
    method_id: Identifier()
    amount: Float(required=True)
    paid_at: DateTime(required=True)


@commerce.event(part_of="Payment")
class PaymentUpdated:
    __version__ = 1

    payment_id: Identifier(required=True)
    order_id: Identifier(required=True)
    method_id: Identifier()
    previous_amount: Float(required=True)
    amount: Float(required=True)


@commerce.event(part_of="Payment")
class PaymentVoided:
    __version__ = 1

    payment_id: Identifier(required=True)
    order_id: Identifier(required=True)
    amount: Float(required=True)
