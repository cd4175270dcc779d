"""Line item changes on an existing order: commands and handler.

Each change moves stock by the difference it makes: adding takes the new
quantity, raising a quantity takes the increase, lowering it gives back the
decrease, and removing an item gives back all of it.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, Integer
from protean.utils.globals import current_domain

from expirapp.catalogue.product.product import Product
from expirapp.domain import commerce
from expirapp.ordering.order import stock
from expirapp.ordering.order.order import Order
from expirapp.shared.errors import ItemOrderMismatchError

logger = structlog.get_logger(__name__)


@commerce.command(part_of="Order")
class AddOrderItem:
    """Add a line item, taking its quantity from the product's stock."""

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(min_value=0.0)


@commerce.command(part_of="Order")
class UpdateOrderItem:
    """Change the quantity or unit price of a line item, moving stock by the difference."""

    order_id = Identifier(required=True)
    item_id = Identifier(required=True)
    quantity = Integer(min_value=1)
    unit_price = Float(min_value=0.0)


@commerce.command(part_of="Order")
class RemoveOrderItem:
    """Remove a line item and return its full quantity to stock."""

    order_id = Identifier(required=True)
    item_id = Identifier(required=True)


def _item_of(order, item_id, repo):
    item = order.find_item(item_id)
    if item is not None:
        return item
    if repo.item_exists(item_id):
        raise ItemOrderMismatchError({"item_id": [f"Item {item_id} does not belong to order {order.id}"]})
    raise ObjectNotFoundError(f"`OrderItem` object with identifier `{item_id}` does not exist.")


@commerce.command_handler(part_of=Order)
class ManageOrderItemsHandler:
    @handle(AddOrderItem)
    def add_item(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_live(command.order_id)

        product_repo = current_domain.repository_for(Product)
        product = product_repo.get_live(command.product_id)
        product.consume(command.quantity)

        unit_price = product.price if command.unit_price is None else command.unit_price
        item = order.add_item(product.id, command.quantity, unit_price)

        product_repo.add(product)
        repo.add(order)
        return str(item.id)

    @handle(UpdateOrderItem)
    def update_item(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_live(command.order_id)
        item = _item_of(order, command.item_id, repo)

        changes = {}
        if command.quantity is not None:
            delta = command.quantity - item.quantity
            if delta > 0:
                product_repo = current_domain.repository_for(Product)
                product = product_repo.get_live(item.product_id)
                product.consume(delta)
                product_repo.add(product)
            elif delta < 0:
                stock.restore(item.product_id, -delta)
            changes["quantity"] = command.quantity
        if command.unit_price is not None:
            changes["unit_price"] = command.unit_price

        order.change_item(item.id, **changes)
        repo.add(order)

    @handle(RemoveOrderItem)
    def remove_item(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get_live(command.order_id)
        item = _item_of(order, command.item_id, repo)

        stock.restore(item.product_id, item.quantity)
        order.remove_item(item.id)
        repo.add(order)

        logger.info(
            "Order item removed",
            order_id=str(order.id),
            item_id=str(item.id),
            restored_quantity=item.quantity,
        )
