"""Domain events for the Product aggregate."""

from protean.fields import Date, DateTime, Float, Identifier, Integer, String

from expirapp.domain import commerce


@commerce.event(part_of="Product")
class ProductAdded:
    """A new product was added to the catalogue."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    expiration_date: Date(required=True)
    stock: Integer(required=True)
    added_at: DateTime(required=True)


@commerce.event(part_of="Product")
class ProductDetailsUpdated:
    """Name, description, price or expiration date of a product changed."""

    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    price: Float(required=True)
    expiration_date: Date(required=True)


@commerce.event(part_of="Product")
class StockAdjusted:
    """The stock count of a product moved by ``delta`` units."""

    __version__ = 1

    product_id: Identifier(required=True)
    delta: Integer(required=True)
    stock: Integer(required=True)


@commerce.event(part_of="Product")
class ProductRemoved:
    """A product was withdrawn from the catalogue (soft delete)."""

    __version__ = 1

    product_id: Identifier(required=True)
    removed_at: DateTime(required=True)
