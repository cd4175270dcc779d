"""Queries over live (not voided) payments."""

from protean.exceptions import ObjectNotFoundError

from expirapp.domain import commerce
from expirapp.payments.payment.payment import Payment
from expirapp.shared.money import sum_cents
from expirapp.shared.pagination import Page, fetch_all, paginate


@commerce.repository(part_of=Payment)
class PaymentRepository:
    def _live(self):
        return self._dao.query.filter(is_deleted=False)

    def get_live(self, payment_id) -> Payment:
        payment = self.get(payment_id)
        if payment.is_deleted:
            raise ObjectNotFoundError(f"`Payment` object with identifier `{payment_id}` does not exist.")
        return payment

    def for_order(self, order_id) -> list[Payment]:
        return fetch_all(self._live().filter(order_id=str(order_id)).order_by("paid_at"))

    def paid_cents(self, order_id) -> int:
        return sum_cents(payment.amount for payment in self.for_order(order_id))

    def count_for_method(self, method_id) -> int:
        return self._live().filter(method_id=str(method_id)).all().total

    def list_page(self, page: int | None = None, limit: int | None = None) -> Page:
        return paginate(self._live().order_by("-paid_at"), page, limit)
