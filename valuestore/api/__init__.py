"""
HTTP layer for the values service: routes, error mapping and app factory.
"""

from valuestore.api.app import create_app
from valuestore.api.errors import register_exception_handlers
from valuestore.api.routes import build_values_router

__all__ = ["create_app", "build_values_router", "register_exception_handlers"]
