"""Stockroom FastAPI application.

Web server that processes stockroom commands synchronously via HTTP.
Every request runs inside the stockroom domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 4731 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - unset / "test" → in-memory provider
#   - "sqlite"       → local SQLite file
#   - "production"   → PostgreSQL at $DATABASE_URL
from fastapi import FastAPI, Request
from protean.integrations.fastapi import register_exception_handlers
from stockroom.domain import stockroom
from stockroom.utils.logging import add_context, clear_context

stockroom.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Stockroom API",
    description="Inventory backend: products and stock movements",
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the stockroom domain context for each request.

    The request method and path are bound to the log context for the
    duration of the request, so every log line it produces carries them.
    """
    clear_context()
    add_context(method=request.method, path=request.url.path)
    try:
        with stockroom.domain_context():
            response = await call_next(request)
    finally:
        clear_context()
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from stockroom.api import health_router, product_router  # noqa: E402

app.include_router(health_router)
app.include_router(product_router)

# ValidationError → 400, ObjectNotFoundError → 404
register_exception_handlers(app)
