"""Product details and removal: commands and handler.

``UpdateProduct`` carries explicit presence: a field left as ``None`` is not
touched, while ``0`` or ``0.0`` are applied like any other value.
"""

from protean import handle
from protean.fields import Date, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from expirapp.catalogue.product.product import Product
from expirapp.domain import commerce


@commerce.command(part_of="Product")
class UpdateProduct:
    """Change any supplied product detail, stock included."""

    product_id: Identifier(required=True)
    name: String(max_length=100)
    description: Text()
    price: Float(min_value=0.0)
    expiration_date: Date()
    stock: Integer()


@commerce.command(part_of="Product")
class RemoveProduct:
    """Soft-delete a product from the catalogue."""

    product_id: Identifier(required=True)


@commerce.command_handler(part_of=Product)
class ManageProductDetailsHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_live(command.product_id)

        changes = {
            field: getattr(command, field)
            for field in ("name", "description", "price", "expiration_date", "stock")
            if getattr(command, field) is not None
        }
        product.update_details(**changes)
        repo.add(product)

    @handle(RemoveProduct)
    def remove_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_live(command.product_id)
        product.remove()
        repo.add(product)
