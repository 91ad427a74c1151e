"""FastAPI routes for the Stockroom domain: products and stock movements."""

from fastapi import APIRouter

from stockroom.api.schemas import (
    BalanceResponse,
    CreateProductRequest,
    HealthResponse,
    ProductListResponse,
    ProductResponse,
    StockMovementRequest,
)
from stockroom.product.service import ProductService

product_service = ProductService()

# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_product(body: CreateProductRequest) -> ProductResponse:
    output = product_service.create(name=body.name, price=body.price)
    return ProductResponse(**output)


@product_router.get("", response_model=ProductListResponse)
async def list_products() -> ProductListResponse:
    output = product_service.list()
    return ProductListResponse(**output)


@product_router.post("/{product_id}/buy", response_model=BalanceResponse)
async def buy_stock(product_id: str, body: StockMovementRequest) -> BalanceResponse:
    output = product_service.buy(product_id=product_id, amount=body.amount)
    return BalanceResponse(**output)


@product_router.post("/{product_id}/sell", response_model=BalanceResponse)
async def sell_stock(product_id: str, body: StockMovementRequest) -> BalanceResponse:
    output = product_service.sell(product_id=product_id, amount=body.amount)
    return BalanceResponse(**output)


# ---------------------------------------------------------------------------
# Health Router
# ---------------------------------------------------------------------------
health_router = APIRouter(tags=["health"])


@health_router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()
