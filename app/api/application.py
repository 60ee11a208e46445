"""FastAPI application factory for the service.

This module registers the route table and the environment-dependent
collaborators: API docs, debug tracebacks and HTTPS redirection.
"""

import logging
from datetime import datetime, timezone
from typing import Callable

from fastapi import FastAPI, status
from fastapi.responses import JSONResponse
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware

from app.config import AppSettings
from app.observability import observability_log_request
from app.runtime import RuntimeInfoPort

from .handlers import HandlerContext
from .routes import RouteDefinition, api_build_route_table

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def api_utc_now() -> datetime:
    """Return the current timezone-aware UTC instant.

    Reads the wall clock, which is not monotonic: an NTP or manual clock step
    backwards makes a later response carry an earlier timestamp. Inject a
    custom clock into `create_api_application` where strict ordering matters.

    Returns:
        datetime: Current UTC instant.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    return datetime.now(timezone.utc)


def create_api_application(
    settings: AppSettings,
    runtime_info: RuntimeInfoPort,
    clock: Clock | None = None,
    routes: tuple[RouteDefinition, ...] | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        runtime_info: Host and process runtime provider used by handlers.
        clock: Optional UTC clock; defaults to the system clock.
        routes: Optional route table; defaults to `api_build_route_table()`.

    Returns:
        FastAPI: Framework application with every route registered.

    Raises:
        ValueError: Raised when a required collaborator is missing.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if runtime_info is None:
        raise ValueError("runtime_info must not be None")

    resolved_clock = clock or api_utc_now
    route_table = routes if routes is not None else api_build_route_table()
    development = settings.is_development

    application = FastAPI(
        title=settings.application_name,
        version=settings.application_version or "0.0.0",
        debug=development,
        docs_url="/docs" if development else None,
        redoc_url=None,
        openapi_url="/openapi.json" if development else None,
    )

    if settings.https_redirect_enabled:
        application.add_middleware(HTTPSRedirectMiddleware)
    application.middleware("http")(observability_log_request)

    for route in route_table:
        application.add_api_route(
            route.path,
            _api_build_endpoint(route, settings, runtime_info, resolved_clock),
            methods=[route.method],
            name=route.name,
            operation_id=route.name,
            tags=[route.tag],
            response_class=JSONResponse,
        )
        logger.debug("registered route %s %s as %s", route.method, route.path, route.name)

    logger.info(
        "application created: environment=%s routes=%d docs=%s https_redirect=%s",
        settings.environment_name,
        len(route_table),
        development,
        settings.https_redirect_enabled,
    )
    return application


def _api_build_endpoint(
    route: RouteDefinition,
    settings: AppSettings,
    runtime_info: RuntimeInfoPort,
    clock: Clock,
) -> Callable[[], JSONResponse]:
    """Bind one route table entry to a FastAPI endpoint callable.

    Args:
        route: Route table entry.
        settings: Validated application settings.
        runtime_info: Host and process runtime provider.
        clock: UTC clock read once per request.

    Returns:
        Callable[[], JSONResponse]: Parameterless endpoint named after the route.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    def endpoint() -> JSONResponse:
        context = HandlerContext(settings=settings, runtime_info=runtime_info, now=clock())
        payload = route.serializer(route.handler(context))
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    endpoint.__name__ = route.name
    endpoint.__doc__ = route.handler.__doc__
    return endpoint
