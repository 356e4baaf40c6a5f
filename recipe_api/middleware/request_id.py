"""
Recipe API - Request ID Middleware
====================================

What:  Tags each request with a short correlation id, echoes it back in the
       `X-Request-ID` response header and stamps it on every log record.
Why:   Error bodies carry only `{"error": ...}`; the header lets a client quote
       the id so the matching server log lines can be found.
How:   The middleware stores the id in a ContextVar. `RequestIDFilter`, attached
       to the log handler in main.setup_logging, copies it onto each record as
       `%(request_id)s`, so loggers never format it themselves.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own id
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


def new_request_id() -> str:
    return uuid.uuid4().hex[:8]


class RequestIDFilter(logging.Filter):
    """Adds `record.request_id`: the current request's id, or "-" outside one."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get() or "-"
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Reuses a client-supplied X-Request-ID or generates one."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
