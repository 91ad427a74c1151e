"""Tests for the Product aggregate root."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.reflection import declared_fields
from stockroom.product.product import InsufficientStockError, Product


class TestProductConstruction:
    def test_element_type(self):
        from protean.utils import DomainObjects

        assert Product.element_type == DomainObjects.AGGREGATE

    def test_declared_fields(self):
        fields = declared_fields(Product)
        assert "id" in fields
        assert "name" in fields
        assert "price" in fields
        assert "quantity" in fields
        assert "created_at" in fields

    def test_create_starts_with_empty_shelf(self):
        product = Product.create(name="Product 1", price=100)
        assert product.name == "Product 1"
        assert product.price == 100
        assert product.quantity == 0
        assert product.created_at is not None

    def test_create_assigns_fresh_identity(self):
        ids = {str(Product.create(name=f"Product {i}", price=1.5).id) for i in range(50)}
        assert len(ids) == 50

    def test_name_is_required(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create(name=None, price=10)
        assert "name" in exc_info.value.messages

    def test_price_cannot_be_negative(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.create(name="Widget", price=-1)
        assert "price" in exc_info.value.messages


class TestProductReconstruct:
    def test_keeps_identity_and_quantity(self):
        product = Product.reconstruct({"id": "prod-001", "name": "Widget", "price": 2.5, "quantity": 42})
        assert str(product.id) == "prod-001"
        assert product.name == "Widget"
        assert product.price == 2.5
        assert product.quantity == 42

    def test_parses_iso_created_at(self):
        product = Product.reconstruct(
            {
                "id": "prod-002",
                "name": "Widget",
                "price": 2.5,
                "quantity": 1,
                "created_at": "2024-03-01T10:15:00",
            }
        )
        assert product.created_at.year == 2024
        assert product.created_at.hour == 10

    def test_rejects_negative_quantity(self):
        with pytest.raises(ValidationError) as exc_info:
            Product.reconstruct({"id": "prod-003", "name": "Widget", "price": 2.5, "quantity": -1})
        assert "quantity" in exc_info.value.messages


class TestBuy:
    def test_buy_increases_quantity(self):
        product = Product.create(name="Widget", price=3)
        product.buy(10)
        assert product.quantity == 10

    def test_buy_zero_is_a_no_op(self):
        product = Product.reconstruct({"id": "p", "name": "Widget", "price": 3, "quantity": 4})
        product.buy(0)
        assert product.quantity == 4

    def test_buy_needs_no_stock_on_hand(self):
        product = Product.create(name="Widget", price=3)
        product.buy(1000)
        assert product.quantity == 1000

    def test_buy_rejects_negative_amount(self):
        product = Product.reconstruct({"id": "p", "name": "Widget", "price": 3, "quantity": 4})
        with pytest.raises(ValidationError) as exc_info:
            product.buy(-5)
        assert "amount" in exc_info.value.messages
        assert product.quantity == 4


class TestSell:
    def test_sell_decreases_quantity(self):
        product = Product.reconstruct({"id": "p", "name": "Widget", "price": 3, "quantity": 10})
        product.sell(3)
        assert product.quantity == 7

    def test_sell_entire_stock(self):
        product = Product.reconstruct({"id": "p", "name": "Widget", "price": 3, "quantity": 10})
        product.sell(10)
        assert product.quantity == 0

    def test_sell_more_than_on_hand_fails(self):
        product = Product.create(name="Widget", price=3)
        with pytest.raises(InsufficientStockError) as exc_info:
            product.sell(5)
        assert "amount" in exc_info.value.messages
        assert product.quantity == 0

    def test_insufficient_stock_is_a_validation_error(self):
        product = Product.create(name="Widget", price=3)
        with pytest.raises(ValidationError):
            product.sell(1)

    def test_sell_rejects_negative_amount(self):
        product = Product.reconstruct({"id": "p", "name": "Widget", "price": 3, "quantity": 2})
        with pytest.raises(ValidationError) as exc_info:
            product.sell(-1)
        assert "amount" in exc_info.value.messages
        assert product.quantity == 2


class TestSummary:
    def test_summary_exposes_public_fields_only(self):
        product = Product.reconstruct({"id": "prod-009", "name": "Widget", "price": 9.99, "quantity": 3})
        assert product.summary() == {"id": "prod-009", "name": "Widget", "price": 9.99, "quantity": 3}
