"""Faker-based data generators for Locust load test scenarios.

Payloads match the field names and constraints of the Stockroom API's
Pydantic request schemas.
"""

import random

from faker import Faker

fake = Faker()


def product_name() -> str:
    """Catalogue-style name such as 'Ergonomic Steel Lamp 4821'."""
    return f"{fake.catch_phrase()[:200]} {random.randint(1000, 9999)}"


def product_data() -> dict:
    return {
        "name": product_name(),
        "price": round(random.uniform(0.5, 500.0), 2),
    }


def buy_amount() -> int:
    return random.randint(5, 50)


def sell_amount(on_hand: int) -> int:
    """Usually within stock, occasionally above it to exercise rejections."""
    if on_hand <= 0 or random.random() < 0.1:
        return on_hand + random.randint(1, 5)
    return random.randint(1, on_hand)
