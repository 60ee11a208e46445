"""Explicit route table for the HTTP surface.

The table is an ordered tuple built once at startup; the application factory
registers it as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from .handlers import (
    HandlerContext,
    api_handle_health,
    api_handle_info,
    api_handle_products,
    api_handle_root,
)
from .serializers import (
    api_serialize_catalog,
    api_serialize_health,
    api_serialize_info,
    api_serialize_welcome,
)


@dataclass(frozen=True)
class RouteDefinition:
    """One entry of the route table.

    Attributes:
        method: HTTP method.
        path: Exact request path.
        name: Stable operation name, also used as the OpenAPI operation id.
        handler: Pure handler producing a domain model.
        serializer: Converter from the domain model to a JSON payload.
        tag: OpenAPI grouping tag.
    """

    method: str
    path: str
    name: str
    handler: Callable[[HandlerContext], Any]
    serializer: Callable[[Any], dict[str, object]]
    tag: str


def api_build_route_table() -> tuple[RouteDefinition, ...]:
    """Build the ordered route table.

    Returns:
        tuple[RouteDefinition, ...]: Every route the service answers.
    """

    return (
        RouteDefinition("GET", "/", "GetRoot", api_handle_root, api_serialize_welcome, "foundation"),
        RouteDefinition("GET", "/health", "HealthCheck", api_handle_health, api_serialize_health, "health"),
        RouteDefinition("GET", "/api/products", "GetProducts", api_handle_products, api_serialize_catalog, "products"),
        RouteDefinition("GET", "/api/info", "GetApplicationInfo", api_handle_info, api_serialize_info, "info"),
    )
