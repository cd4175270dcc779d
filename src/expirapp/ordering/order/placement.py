"""PlaceOrder: create an order and take stock for all of its items.

Demand is summed per product before anything is checked, so two lines for
the same product are validated against their combined quantity. Every check
runs before the first write; the order, its items and the stock decrements
then land in the handler's single unit of work.
"""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from expirapp.domain import commerce
from expirapp.ordering.order import stock
from expirapp.ordering.order.order import Order

logger = structlog.get_logger(__name__)


def parse_lines(raw):
    """Turn the JSON ``items`` payload into ``(product_id, quantity, unit_price)`` tuples.

    ``unit_price`` is ``None`` when the caller left it out.
    """
    try:
        items = json.loads(raw) if isinstance(raw, str) else raw
    except json.JSONDecodeError:
        raise ValidationError({"items": ["Items must be valid JSON"]}) from None

    if not isinstance(items, list):
        raise ValidationError({"items": ["Items must be a list"]})

    lines = []
    for index, item in enumerate(items):
        if not isinstance(item, dict) or not item.get("product_id"):
            raise ValidationError({"items": [f"Item {index} needs a product_id"]})

        quantity = item.get("quantity")
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            raise ValidationError({"items": [f"Item {index} quantity must be a positive integer"]})

        unit_price = item.get("unit_price")
        if unit_price is not None and (not isinstance(unit_price, int | float) or unit_price < 0):
            raise ValidationError({"items": [f"Item {index} unit_price must be zero or positive"]})

        lines.append((str(item["product_id"]), quantity, unit_price))
    return lines


@commerce.command(part_of="Order")
class PlaceOrder:
    """Place an order and take stock for all of its lines at once."""

    client_id = Identifier(required=True)
    seller_id = Identifier()
    items = Text(required=True)  # JSON: list of {product_id, quantity, unit_price?}


@commerce.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        lines = parse_lines(command.items)
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        demand = stock.demand_by_product(lines)
        products = stock.check_availability(demand)

        priced_lines = [
            (product_id, quantity, products[product_id].price if unit_price is None else unit_price)
            for product_id, quantity, unit_price in lines
        ]
        order = Order.place(
            client_id=command.client_id,
            seller_id=command.seller_id,
            lines=priced_lines,
        )

        stock.consume(products, demand)
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            client_id=str(command.client_id),
            item_count=len(priced_lines),
            total=order.total,
        )
        return str(order.id)
