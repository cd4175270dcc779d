"""Order aggregate: a client's purchase and the line items it owns.

An order has no status field. It exists from the moment it is placed until it
is deleted. The total is never stored; it is recomputed from the line items
in integer cents on every read.
"""

from datetime import UTC, date, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, Date, DateTime, Float, HasMany, Identifier, Integer

from expirapp.domain import commerce
from expirapp.ordering.order.events import (
    OrderDeleted,
    OrderItemAdded,
    OrderItemChanged,
    OrderItemRemoved,
    OrderPlaced,
)
from expirapp.shared.money import from_cents, line_total_cents

_UNSET = object()


@commerce.entity(part_of="Order")
class OrderItem:
    """One product and quantity within an order, priced at the time of sale."""

    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)
    created_at = DateTime()

    @property
    def subtotal_cents(self):
        return line_total_cents(self.quantity, self.unit_price)

    @property
    def subtotal(self):
        return from_cents(self.subtotal_cents)


@commerce.aggregate
class Order:
    client_id = Identifier(required=True)
    seller_id = Identifier()
    purchase_date = Date()
    items = HasMany(OrderItem)
    is_deleted = Boolean(default=False)
    deleted_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def place(cls, client_id, lines, seller_id=None):
        """Create an order from ``(product_id, quantity, unit_price)`` lines.

        Stock is not touched here; the caller takes it from the products in
        the same unit of work.
        """
        if not lines:
            raise ValidationError({"items": ["An order needs at least one item"]})

        now = datetime.now(UTC)
        order = cls(
            client_id=client_id,
            seller_id=seller_id,
            purchase_date=date.today(),
            created_at=now,
            updated_at=now,
        )
        for product_id, quantity, unit_price in lines:
            order.add_items(
                OrderItem(
                    product_id=product_id,
                    quantity=quantity,
                    unit_price=unit_price,
                    created_at=datetime.now(UTC),
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                client_id=client_id,
                seller_id=seller_id,
                item_count=len(order.items),
                total=order.total,
            )
        )
        return order

    @property
    def total_cents(self):
        return sum(item.subtotal_cents for item in self.items)

    @property
    def total(self):
        return from_cents(self.total_cents)

    def line_items(self):
        """Items in the order they were added."""
        return sorted(self.items, key=lambda item: item.created_at or datetime.min.replace(tzinfo=UTC))

    def find_item(self, item_id):
        return next((item for item in self.items if str(item.id) == str(item_id)), None)

    def add_item(self, product_id, quantity, unit_price):
        item = OrderItem(
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
            created_at=datetime.now(UTC),
        )
        self.add_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderItemAdded(
                order_id=self.id,
                item_id=item.id,
                product_id=product_id,
                quantity=quantity,
                unit_price=unit_price,
            )
        )
        return item

    def change_item(self, item_id, quantity=_UNSET, unit_price=_UNSET):
        item = self.find_item(item_id)
        if item is None:
            raise ValidationError({"item_id": ["Item not found"]})

        previous_quantity = item.quantity
        if quantity is not _UNSET:
            item.quantity = quantity
        if unit_price is not _UNSET:
            item.unit_price = unit_price
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderItemChanged(
                order_id=self.id,
                item_id=item.id,
                previous_quantity=previous_quantity,
                quantity=item.quantity,
                unit_price=item.unit_price,
            )
        )
        return item

    def remove_item(self, item_id):
        item = self.find_item(item_id)
        if item is None:
            raise ValidationError({"item_id": ["Item not found"]})

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)

        self.raise_(
            OrderItemRemoved(
                order_id=self.id,
                item_id=item.id,
                product_id=item.product_id,
                quantity=item.quantity,
            )
        )

    def reassign_seller(self, seller_id):
        self.seller_id = seller_id
        self.updated_at = datetime.now(UTC)

    def discard(self):
        """Soft-delete the order and drop its line items."""
        released = len(self.items)
        for item in list(self.items):
            self.remove_items(item)

        now = datetime.now(UTC)
        self.is_deleted = True
        self.deleted_at = now
        self.updated_at = now

        self.raise_(OrderDeleted(order_id=self.id, released_items=released))
