"""Product creation: command and handler."""

import structlog
from protean import handle
from protean.fields import Float, String
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.product.product import Product

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Product")
class CreateProduct:
    """Add a new product to the stockroom with nothing on hand."""

    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)


@stockroom.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(name=command.name, price=command.price)
        current_domain.repository_for(Product).save(product)

        logger.info("Product created", product_id=str(product.id), name=product.name, price=product.price)
        return product.summary()
