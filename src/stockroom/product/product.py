"""Product aggregate: a stocked item and its quantity on hand.

Identity, name and price are fixed once the product exists; ``quantity`` is
the only field that changes, and only through ``buy`` and ``sell``. Both
mutators validate before touching state, so a rejected movement leaves the
product exactly as it was.
"""

from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String

from stockroom.domain import stockroom


class InsufficientStockError(ValidationError):
    """A sale asked for more units than are on hand."""


@stockroom.aggregate
class Product:
    """Product aggregate root."""

    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(default=0, min_value=0)
    created_at = DateTime(default=datetime.now)

    @invariant.post
    def quantity_cannot_be_negative(self):
        if self.quantity is not None and self.quantity < 0:
            raise ValidationError({"quantity": ["Quantity cannot be negative"]})

    @classmethod
    def create(cls, name, price):
        """Mint a new product with a fresh identity and an empty shelf."""
        return cls(name=name, price=price, quantity=0, created_at=datetime.now())

    @classmethod
    def reconstruct(cls, props):
        """Rebuild a product from a stored ``{id, name, price, quantity}`` record.

        The identity and quantity are taken as-is; nothing is regenerated.
        """
        created_at = props.get("created_at") or datetime.now()
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)

        return cls(
            id=props["id"],
            name=props["name"],
            price=props["price"],
            quantity=props["quantity"],
            created_at=created_at,
        )

    def buy(self, amount):
        """Receive ``amount`` units into stock."""
        _check_amount(amount)
        self.quantity += amount

    def sell(self, amount):
        """Issue ``amount`` units from stock.

        Raises ``InsufficientStockError`` when fewer than ``amount`` units
        are on hand.
        """
        _check_amount(amount)
        if amount > self.quantity:
            raise InsufficientStockError(
                {"amount": [f"Insufficient stock: requested {amount}, on hand {self.quantity}"]}
            )
        self.quantity -= amount

    def summary(self):
        """Public fields of the product, as returned to callers."""
        return {
            "id": str(self.id),
            "name": self.name,
            "price": self.price,
            "quantity": self.quantity,
        }


def _check_amount(amount):
    if amount is None or amount < 0:
        raise ValidationError({"amount": ["Amount must be zero or positive"]})
