"""API layer package for FastAPI application and route composition."""

from .application import api_utc_now, create_api_application
from .handlers import HandlerContext
from .routes import RouteDefinition, api_build_route_table

__all__ = [
    "HandlerContext",
    "RouteDefinition",
    "api_build_route_table",
    "api_utc_now",
    "create_api_application",
]
