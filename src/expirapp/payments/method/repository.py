from expirapp.domain import commerce
from expirapp.payments.method.method import PaymentMethod
from expirapp.shared.pagination import fetch_all


@commerce.repository(part_of=PaymentMethod)
class PaymentMethodRepository:
    def find_by_name(self, name: str) -> PaymentMethod | None:
        return self._dao.query.filter(name=name).all().first

    def list_all(self) -> list[PaymentMethod]:
        return fetch_all(self._dao.query.order_by("name"))

    def remove(self, method: PaymentMethod) -> None:
        self._dao.delete(method)
