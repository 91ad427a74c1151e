from stockroom.api.routes import health_router, product_router

__all__ = ["health_router", "product_router"]
