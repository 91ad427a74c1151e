import pytest


@pytest.fixture(scope="session")
def _stockroom_domain():
    """Initialize the stockroom domain once per session."""
    from stockroom.domain import stockroom

    stockroom.init()
    return stockroom


@pytest.fixture(scope="session", autouse=True)
def setup_db(_stockroom_domain):
    from stockroom.utils.db import drop_db, setup_db

    setup_db(_stockroom_domain)

    yield

    drop_db(_stockroom_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_stockroom_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _stockroom_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    ctx.pop()


@pytest.fixture()
def product_service():
    from stockroom.product.service import ProductService

    return ProductService()
