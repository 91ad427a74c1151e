"""Shared BDD fixtures and step definitions for the Stockroom domain."""

import pytest
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then
from stockroom.product.product import Product


@pytest.fixture()
def outcome():
    """Mutable record of the last stock movement's result or error."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a product "{name}" priced at {price:g}'),
    target_fixture="product",
)
def _(product_service, name, price):
    return product_service.create(name=name, price=price)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the balance is {balance:d}"))
def _(outcome, balance):
    assert "error" not in outcome
    assert outcome["result"]["balance"] == balance


@then(parsers.cfparse("the product has {quantity:d} units on hand"))
def _(product, quantity):
    stored = current_domain.repository_for(Product).find_by_id(product["id"])
    assert stored.quantity == quantity
