"""Product creation: command and handler."""

import structlog
from protean import handle
from protean.fields import Date, Float, Integer, String, Text
from protean.utils.globals import current_domain

from expirapp.catalogue.product.product import Product
from expirapp.domain import commerce

logger = structlog.get_logger(__name__)


@commerce.command(part_of="Product")
class AddProduct:
    """Add a product to the catalogue with its opening stock."""

    name: String(required=True, max_length=100)
    description: Text()
    price: Float(required=True, min_value=0.0)
    expiration_date: Date(required=True)
    stock: Integer(default=0)


@commerce.command_handler(part_of=Product)
class AddProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        product = Product.add(
            name=command.name,
            description=command.description,
            price=command.price,
            expiration_date=command.expiration_date,
            stock=command.stock,
        )
        current_domain.repository_for(Product).add(product)

        logger.info("Product added", product_id=str(product.id), name=product.name, stock=product.stock)
        return str(product.id)
