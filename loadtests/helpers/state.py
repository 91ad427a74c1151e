"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state, apart from the one contended product in scenarios/stock.py.
State tracks the product created at the start of a journey and the stock
the user expects it to hold.
"""

from dataclasses import dataclass


@dataclass
class ProductState:
    """Tracks state for a single simulated product."""

    product_id: str | None = None
    expected_on_hand: int = 0
    rejected_sales: int = 0
