"""Repository for the Product aggregate.

The storage technology is whichever provider the domain is configured with
(memory, SQLite, PostgreSQL); this class only names the operations the
stockroom needs on top of the base ``add``/``get``.
"""

from stockroom.domain import stockroom
from stockroom.product.product import Product


@stockroom.repository(part_of=Product)
class ProductRepository:
    def save(self, product: Product) -> None:
        """Persist a newly created product."""
        self.add(product)

    def find_by_id(self, product_id: str) -> Product:
        """Load a product, raising ``ObjectNotFoundError`` when there is none."""
        return self.get(product_id)

    def update(self, product: Product) -> None:
        """Persist the current state of an existing product.

        Unknown products raise ``ObjectNotFoundError`` rather than being
        created implicitly.
        """
        self.get(product.id)
        self.add(product)

    def list(self) -> list[Product]:
        """Every product, in the order it was first stocked."""
        query = self._dao.query.order_by("created_at")
        # Queries are capped at a default page size; widen it to the row count
        total = query.all().total
        return query.limit(max(total, 1)).all().items
