"""
Recipe API - Access Log Middleware
====================================

What:  One access-log line per API call, keyed by the matched route template
       (`GET /api/recipes/{recipe_id} 404 1.2ms`) rather than the raw path, so
       lines for the same endpoint group together whatever id was requested.
       Unmatched paths are logged as-is.

Level by status class:
    5xx → ERROR, 4xx → WARNING, everything else → INFO.

The request id comes from RequestIDFilter; request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("recipe_api.access")

# Liveness/readiness probes would drown out real traffic
QUIET_PATHS = frozenset({"/", "/health"})


def route_template(request: Request) -> str:
    """The path pattern of the route that handled the request, else the raw path."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or request.url.path


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class AccessLogMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        endpoint = route_template(request)
        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms",
            request.method,
            endpoint,
            response.status_code,
            elapsed_ms,
            extra={"endpoint": endpoint, "path_params": dict(request.path_params)},
        )
        return response
