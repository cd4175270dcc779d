"""AdjustStock: the unchecked signed stock primitive.

The handler applies ``stock = stock + delta`` without a floor. Order flows
use the checked ``Product.consume``/``Product.restock`` instead.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from expirapp.catalogue.product.product import Product
from expirapp.domain import commerce

logger = structlog.get_logger(__name__)


@commerce.command(part_of="Product")
class AdjustStock:
    """Add a signed delta to a product's stock with no floor."""

    product_id: Identifier(required=True)
    delta: Integer(required=True)


@commerce.command_handler(part_of=Product)
class AdjustStockHandler:
    @handle(AdjustStock)
    def adjust_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_live(command.product_id)
        product.adjust_stock(command.delta)
        repo.add(product)

        if product.stock < 0:
            logger.warning("Stock adjusted below zero", product_id=str(product.id), stock=product.stock)
        return product.stock
