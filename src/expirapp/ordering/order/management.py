"""Order-level changes: seller reassignment and deletion."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from expirapp.domain import commerce
from expirapp.ordering.order import stock
from expirapp.ordering.order.order import Order

logger = structlog.get_logger(__name__)


@commerce.command(part_of="Order")
class UpdateOrder:
    """Reassign the seller of an order."""

    order_id = Identifier(required=True)
    seller_id = Identifier()


@commerce.command(part_of="Order")
class DeleteOrder:
    """Give back the stock of every line item, then soft-delete the order."""

    order_id = Identifier(required=True)


@commerce.command_handler(part_of=Order)
class ManageOrderHandler:
    @handle(UpdateOrder)
    def update_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_live(command.order_id)
        if command.seller_id is not None:
            order.reassign_seller(command.seller_id)
        repo.add(order)

    @handle(DeleteOrder)
    def delete_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_live(command.order_id)

        item_count = len(order.items)
        restored = stock.release_items(order)
        order.discard()
        repo.add(order)

        logger.info(
            "Order deleted",
            order_id=str(order.id),
            items=item_count,
            restocked_products=restored,
        )
