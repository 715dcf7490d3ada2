"""
Middleware package for the Feedbin MCP HTTP server.

Plain ASGI middleware for the cross-cutting concerns: request logging and
last-resort error handling.
"""

from .error_handling import ErrorHandlingMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
]
