"""Queries over live orders and their line items."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from expirapp.domain import commerce
from expirapp.ordering.order.order import Order, OrderItem
from expirapp.shared.pagination import Page, paginate


@commerce.repository(part_of=Order)
class OrderRepository:
    def _live(self):
        return self._dao.query.filter(is_deleted=False).order_by("-created_at")

    def get_live(self, order_id) -> Order:
        order = self.get(order_id)
        if order.is_deleted:
            raise ObjectNotFoundError(f"`Order` object with identifier `{order_id}` does not exist.")
        return order

    def item_exists(self, item_id) -> bool:
        """True when a line item with this id exists in any order."""
        items = current_domain.repository_for(OrderItem)._dao.query.filter(id=str(item_id)).all()
        return items.total > 0

    def list_page(self, page: int | None = None, limit: int | None = None) -> Page:
        return paginate(self._live(), page, limit)

    def list_by_client(self, client_id, page: int | None = None, limit: int | None = None) -> Page:
        return paginate(self._live().filter(client_id=str(client_id)), page, limit)

    def list_by_seller(self, seller_id, page: int | None = None, limit: int | None = None) -> Page:
        return paginate(self._live().filter(seller_id=str(seller_id)), page, limit)
