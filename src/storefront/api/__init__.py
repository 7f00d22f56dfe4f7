"""Storefront API package."""

from storefront.api.errors import register_exception_handlers
from storefront.api.routes import basket_router, catalog_router, order_router

__all__ = ["basket_router", "catalog_router", "order_router", "register_exception_handlers"]
