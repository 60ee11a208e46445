"""HTTP request logging middleware."""

from __future__ import annotations

import logging
import time
from typing import Awaitable, Callable

from fastapi import Request, Response, status

logger = logging.getLogger("app.api")


async def observability_log_request(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log one line per request with status and latency.

    Requests whose handler raises are logged with status 500 before the error
    propagates to the host error page.

    Args:
        request: Incoming request.
        call_next: Downstream ASGI handler.

    Returns:
        Response: Downstream response, unchanged.

    Raises:
        Exception: Re-raises any downstream handler error unchanged.
    """

    started = time.perf_counter()
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    try:
        response = await call_next(request)
        status_code = response.status_code
        return response
    finally:
        duration_ms = round((time.perf_counter() - started) * 1000, 3)
        logger.info(
            "%s %s -> %s",
            request.method,
            request.url.path,
            status_code,
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            },
        )
