"""
Error handling middleware for the Feedbin MCP HTTP server.

Catches anything that escapes a handler and, if no response has been started
yet, answers with a consistent 500 ``ErrorResponse`` instead of dropping the
connection.
"""

import logging
import traceback

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from feedbin_mcp.schemas.mcp import ErrorResponse

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware:
    """Middleware for centralized handling of unexpected exceptions."""

    def __init__(self, app: ASGIApp, enable_error_logging: bool = True):
        """
        Initialize the error handling middleware.

        Args:
            app: ASGI application to wrap
            enable_error_logging: Whether to log full tracebacks
        """
        self.app = app
        self.enable_error_logging = enable_error_logging

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def tracking_send(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, tracking_send)
        except Exception as e:
            method = scope.get("method", "")
            path = scope.get("path", "")
            logger.error(f"💥 Unexpected error for {method} {path}: {e}")
            if self.enable_error_logging:
                logger.error(f"📋 Full traceback:\n{traceback.format_exc()}")

            if response_started:
                # Headers are already on the wire; nothing more can be sent
                return

            error_response = ErrorResponse(
                error="Internal server error",
                error_code="INTERNAL_ERROR",
                details={"path": path, "method": method, "error_type": type(e).__name__},
            )
            response = JSONResponse(status_code=500, content=jsonable_encoder(error_response))
            await response(scope, receive, send)
