"""Integration tests for product persistence through the repository."""

import pytest
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from stockroom.product.product import Product
from stockroom.product.repository import ProductRepository


@pytest.fixture()
def repo():
    return current_domain.repository_for(Product)


class TestRepositoryRegistration:
    def test_custom_repository_is_used(self, repo):
        assert isinstance(repo, ProductRepository)


class TestSaveAndFind:
    def test_save_then_find(self, repo):
        product = Product.create(name="Widget", price=3.25)
        repo.save(product)

        found = repo.find_by_id(product.id)
        assert found.id == product.id
        assert found.name == "Widget"
        assert found.price == 3.25
        assert found.quantity == 0

    def test_find_unknown_id_raises_not_found(self, repo):
        with pytest.raises(ObjectNotFoundError):
            repo.find_by_id("missing-product")


class TestUpdate:
    def test_update_persists_quantity(self, repo):
        product = Product.create(name="Widget", price=3.25)
        repo.save(product)

        loaded = repo.find_by_id(product.id)
        loaded.buy(12)
        repo.update(loaded)

        assert repo.find_by_id(product.id).quantity == 12

    def test_update_unknown_product_raises_not_found(self, repo):
        stray = Product.reconstruct({"id": "never-saved", "name": "Ghost", "price": 1.0, "quantity": 1})
        with pytest.raises(ObjectNotFoundError):
            repo.update(stray)

        with pytest.raises(ObjectNotFoundError):
            repo.find_by_id("never-saved")


class TestList:
    def test_list_empty(self, repo):
        assert repo.list() == []

    def test_list_in_stocking_order(self, repo):
        names = [f"Product {i}" for i in range(5)]
        for name in names:
            repo.save(Product.create(name=name, price=1.0))

        assert [p.name for p in repo.list()] == names

    def test_list_is_not_paginated(self, repo):
        for i in range(120):
            repo.save(Product.create(name=f"Product {i}", price=1.0))

        assert len(repo.list()) == 120
