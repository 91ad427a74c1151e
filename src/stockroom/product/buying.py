"""Stock buying: command and handler.

Buying only ever adds stock, so it carries no sufficiency check; the amount
just has to be zero or more.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Integer
from protean.utils.globals import current_domain

from stockroom.domain import stockroom
from stockroom.product.product import Product

logger = structlog.get_logger(__name__)


@stockroom.command(part_of="Product")
class BuyStock:
    """Receive units of a product into stock."""

    product_id = Identifier(required=True)
    amount = Integer(required=True, min_value=0)


@stockroom.command_handler(part_of=Product)
class BuyStockHandler:
    @handle(BuyStock)
    def buy_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.find_by_id(command.product_id)
        product.buy(command.amount)
        repo.update(product)

        logger.info("Stock bought", product_id=str(product.id), amount=command.amount, balance=product.quantity)
        return {"id": str(product.id), "balance": product.quantity}
