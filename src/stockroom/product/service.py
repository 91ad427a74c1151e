"""Product service: the stockroom's entry point for callers.

Create, buy and sell are dispatched as commands and processed synchronously;
list reads straight from the repository. Every operation returns plain
dictionaries so callers never hold on to live aggregates.
"""

from protean.utils.globals import current_domain

from stockroom.product.buying import BuyStock
from stockroom.product.creation import CreateProduct
from stockroom.product.locking import lock_for
from stockroom.product.product import Product
from stockroom.product.selling import SellStock


class ProductService:
    def create(self, name: str, price: float) -> dict:
        """Create a product; returns ``{id, name, price, quantity}``."""
        return current_domain.process(CreateProduct(name=name, price=price), asynchronous=False)

    def buy(self, product_id: str, amount: int) -> dict:
        """Add ``amount`` units; returns ``{id, balance}``."""
        command = BuyStock(product_id=product_id, amount=amount)
        with lock_for(product_id):
            return current_domain.process(command, asynchronous=False)

    def sell(self, product_id: str, amount: int) -> dict:
        """Remove ``amount`` units; returns ``{id, balance}``.

        Raises ``InsufficientStockError`` without touching stored state when
        fewer than ``amount`` units are on hand.
        """
        command = SellStock(product_id=product_id, amount=amount)
        with lock_for(product_id):
            return current_domain.process(command, asynchronous=False)

    def list(self) -> dict:
        """All products as ``{products: [{id, name, price, quantity}, ...]}``."""
        products = current_domain.repository_for(Product).list()
        return {"products": [product.summary() for product in products]}
