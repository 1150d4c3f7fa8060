"""Middleware for request processing."""

from .auth import CurrentCustomer, get_bearer_token, get_current_customer
from .error_handler import error_handler_middleware
from .request_context import RequestContextMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "CurrentCustomer",
    "get_bearer_token",
    "get_current_customer",
    "error_handler_middleware",
    "RequestContextMiddleware",
    "LoggingMiddleware",
]
