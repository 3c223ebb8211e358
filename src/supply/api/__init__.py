"""Supply domain API package."""

from supply.api.routes import product_router, supplier_router

__all__ = ["product_router", "supplier_router"]
