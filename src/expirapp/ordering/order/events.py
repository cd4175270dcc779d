"""Domain events for the Order aggregate."""

from protean.fields import Float, Identifier, Integer

from expirapp.domain import commerce


@commerce.event(part_of="Order")
class OrderPlaced:
    """An order was placed and the stock for all of its items was taken."""

    __version__ = 1

    order_id: Identifier(required=True)
    client_id: Identifier(required=True)
    seller_id: Identifier()
    item_count: Integer(required=True)
    total: Float(required=True)


@commerce.event(part_of="Order")
class OrderItemAdded:
    __version__ = 1

    order_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    unit_price: Float(required=True)


@commerce.event(part_of="Order")
class OrderItemChanged:
    __version__ = 1

    order_id: Identifier(required=True)
    item_id: Identifier(required=True)
    previous_quantity: Integer(required=True)
    quantity: Integer(required=True)
    unit_price: Float(required=True)


@commerce.event(part_of="Order")
class OrderItemRemoved:
    __version__ = 1

    order_id: Identifier(required=True)
    item_id: Identifier(required=True)
    product_id: Identifier(required=True)
    quantity: Integer(required=True)


@commerce.event(part_of="Order")
class OrderDeleted:
    """An order was deleted; its items were released back to stock where possible."""

    __version__ = 1

    order_id: Identifier(required=True)
    released_items: Integer(required=True)
