"""PaymentMethod aggregate: a named way of paying (cash, card, transfer)."""

from protean.fields import String

from expirapp.domain import commerce


@commerce.aggregate
class PaymentMethod:
    name = String(required=True, min_length=1, max_length=50)

    def rename(self, name):
        self.name = name
