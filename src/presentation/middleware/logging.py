"""Request/response logging middleware with timing."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.core.metrics import record_http_request
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _endpoint_label(request: Request) -> str:
    # Route template keeps label cardinality bounded (/transaction/{transaction_id})
    route = request.scope.get("route")
    template = getattr(route, "path", None)
    if not template:
        return "unmatched"

    path_regex = getattr(route, "path_regex", None)
    path = request.url.path
    if path_regex is None or path_regex.match(path):
        return template

    # Routes under a mounted prefix only know their own segment; restore
    # the prefix the route did not match
    for index, char in enumerate(path):
        if char == "/" and index > 0 and path_regex.match(path[index:]):
            return path[:index] + template
    return template


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request start, completion, and duration; records HTTP metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        query = str(request.query_params) if request.query_params else None

        log = logger.bind(
            request_id=get_request_id(),
            method=method,
            path=path,
        )

        log.info("request_started", query=query)

        try:
            response = await call_next(request)
            duration = time.perf_counter() - start_time

            log.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round(duration * 1000, 2),
            )
            record_http_request(method, _endpoint_label(request), response.status_code, duration)

            return response

        except Exception as e:
            duration = time.perf_counter() - start_time

            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round(duration * 1000, 2),
            )
            record_http_request(method, _endpoint_label(request), 500, duration)
            raise
