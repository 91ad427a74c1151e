"""Pydantic request/response schemas for the Stockroom API.

These are external contracts (anti-corruption layer), separate from
internal Protean commands.
"""

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreateProductRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    price: float = Field(ge=0)


class StockMovementRequest(BaseModel):
    amount: int = Field(ge=0)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class ProductResponse(BaseModel):
    id: str
    name: str
    price: float
    quantity: int


class ProductListResponse(BaseModel):
    products: list[ProductResponse]


class BalanceResponse(BaseModel):
    id: str
    balance: int


class HealthResponse(BaseModel):
    message: str = "OK"
