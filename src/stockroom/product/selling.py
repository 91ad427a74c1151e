"""Stock selling: command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.product.product import InsufficientStockError, Product

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Product")
class SellStock:
    """Issue units of a product from stock."""

    product_id = Identifier(required=True)
    amount = Integer(required=True, min_value=0)


@stockroom.command_handler(part_of=Product)
class SellStockHandler:
    @handle(SellStock)
    def sell_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.find_by_id(command.product_id)

        try:
            product.sell(command.amount)
        except InsufficientStockError:
            logger.warning(
                "Sale rejected for insufficient stock",
                product_id=str(product.id),
                amount=command.amount,
                on_hand=product.quantity,
            )
            raise

        repo.update(product)

        logger.info("Stock sold", product_id=str(product.id), amount=command.amount, balance=product.quantity)
        return {"id": str(product.id), "balance": product.quantity}
