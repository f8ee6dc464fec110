"""Stockroom domain API package."""

from stockroom.api.errors import register_exception_handlers
from stockroom.api.routes import product_router

__all__ = ["product_router", "register_exception_handlers"]
