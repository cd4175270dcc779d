"""Product aggregate: price, expiration date and stock of a catalogue item.

Stock moves through two doors. ``consume`` and ``restock`` are the checked
path used by ordering and never leave stock below zero. ``adjust_stock`` is
the unchecked signed primitive behind ``AdjustStock`` and applies any delta
as given.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, Date, DateTime, Float, Integer, String, Text

from expirapp.catalogue.product.events import (
    ProductAdded,
    ProductDetailsUpdated,
    ProductRemoved,
    StockAdjusted,
)
from expirapp.domain import commerce
from expirapp.shared.errors import InsufficientStockError

_UNSET = object()


@commerce.aggregate
class Product:
    name: String(required=True, min_length=1, max_length=100)
    description: Text()
    price: Float(required=True, min_value=0.0)
    expiration_date: Date(required=True)
    stock: Integer(default=0)
    is_deleted: Boolean(default=False)
    deleted_at: DateTime()
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def add(cls, name, price, expiration_date, description=None, stock=0):
        stock = stock or 0
        if stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

        now = datetime.now(UTC)
        product = cls(
            name=name,
            description=description,
            price=price,
            expiration_date=expiration_date,
            stock=stock,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=product.id,
                name=product.name,
                price=product.price,
                expiration_date=product.expiration_date,
                stock=product.stock,
                added_at=now,
            )
        )
        return product

    def update_details(
        self,
        name=_UNSET,
        description=_UNSET,
        price=_UNSET,
        expiration_date=_UNSET,
        stock=_UNSET,
    ):
        """Apply only the fields that were supplied; zero is a value, not an omission."""
        if stock is not _UNSET and stock < 0:
            raise ValidationError({"stock": ["Stock cannot be negative"]})

        details = {
            "name": name,
            "description": description,
            "price": price,
            "expiration_date": expiration_date,
        }
        supplied = {field: value for field, value in details.items() if value is not _UNSET}
        for field, value in supplied.items():
            setattr(self, field, value)
        self.updated_at = datetime.now(UTC)

        if supplied:
            self.raise_(
                ProductDetailsUpdated(
                    product_id=self.id,
                    name=self.name,
                    price=self.price,
                    expiration_date=self.expiration_date,
                )
            )

        if stock is not _UNSET and stock != self.stock:
            self._move_stock(stock - self.stock)

    def ensure_available(self, quantity):
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if self.stock < quantity:
            raise InsufficientStockError(
                {"stock": [f"Insufficient stock for product {self.name}: available {self.stock}, requested {quantity}"]}
            )

    def consume(self, quantity):
        self.ensure_available(quantity)
        self._move_stock(-quantity)

    def restock(self, quantity):
        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        self._move_stock(quantity)

    def adjust_stock(self, delta):
        """Unchecked signed adjustment. A negative result is accepted as is."""
        self._move_stock(delta)

    def remove(self):
        now = datetime.now(UTC)
        self.is_deleted = True
        self.deleted_at = now
        self.updated_at = now

        self.raise_(ProductRemoved(product_id=self.id, removed_at=now))

    def _move_stock(self, delta):
        self.stock = self.stock + delta
        self.updated_at = datetime.now(UTC)

        self.raise_(StockAdjusted(product_id=self.id, delta=delta, stock=self.stock))
