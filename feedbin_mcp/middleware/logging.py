"""
Logging middleware for the Feedbin MCP HTTP server.

Logs one line per request and one per response with its status and
processing time. Written as plain ASGI middleware so that streamed (SSE)
responses pass through without being buffered.
"""

import logging
import time
from typing import Any, Dict, Optional

from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key", "x-auth-token"}


class LoggingMiddleware:
    """
    Middleware for request/response logging.

    Credentials never reach the log: sensitive headers are dropped and the
    query string is not logged when query-token auth may be in use.
    """

    def __init__(self, app: ASGIApp, enable_detailed_logging: bool = False):
        """
        Initialize the logging middleware.

        Args:
            app: ASGI application to wrap
            enable_detailed_logging: Whether to log non-sensitive request headers at DEBUG
        """
        self.app = app
        self.enable_detailed_logging = enable_detailed_logging

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start_time = time.time()
        method = scope.get("method", "")
        path = scope.get("path", "")
        status_code: Optional[int] = None

        logger.info(f"📥 {method} {path} - {self._client_ip(scope)}")
        if self.enable_detailed_logging:
            logger.debug(f"📋 Request headers: {self._safe_headers(scope)}")

        async def logging_send(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, logging_send)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(f"💥 {method} {path} - ERROR - {process_time:.3f}s - {e}")
            raise

        process_time = time.time() - start_time
        logger.info(f"📤 {method} {path} - {status_code} - {process_time:.3f}s")

    @staticmethod
    def _client_ip(scope: Scope) -> Optional[str]:
        client = scope.get("client")
        return client[0] if client else None

    @staticmethod
    def _safe_headers(scope: Scope) -> Dict[str, Any]:
        headers = {}
        for name, value in scope.get("headers", []):
            key = name.decode("latin-1").lower()
            if key not in SENSITIVE_HEADERS:
                headers[key] = value.decode("latin-1")
        return headers
