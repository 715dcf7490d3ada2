"""
Exception taxonomy for the Feedbin MCP server.

Configuration errors are fatal at startup. Gateway errors are per-request
rejections that render themselves as JSON responses and never touch session
state. Feedbin API errors are turned into MCP tool error results.
"""

from typing import Any, Dict, Optional

from fastapi import status
from fastapi.responses import JSONResponse


class ConfigurationError(Exception):
    """Required configuration is missing or invalid; the process must not start."""


class CredentialsNotConfiguredError(ConfigurationError):
    """An outbound Feedbin call was attempted without account credentials."""

    def __init__(self):
        super().__init__(
            "Feedbin credentials not configured. "
            "Set FEEDBIN_EMAIL and FEEDBIN_PASSWORD environment variables."
        )


class SessionCollisionError(RuntimeError):
    """A session id was inserted twice into the session table."""

    def __init__(self, session_id: str):
        super().__init__(f"Session {session_id} is already registered")
        self.session_id = session_id


class FeedbinAPIError(Exception):
    """Non-success response from the Feedbin API."""

    def __init__(self, status_code: int, reason: str, body: str):
        super().__init__(f"Feedbin API error {status_code} {reason}: {body}")
        self.status_code = status_code
        self.reason = reason
        self.body = body


class GatewayError(Exception):
    """Base class for terminal per-request rejections on the MCP endpoint."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def body(self) -> Dict[str, Any]:
        return {"error": self.message}

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body())


class JSONRPCGatewayError(GatewayError):
    """Rejection rendered as a JSON-RPC error object with a null id."""

    code: int = -32000

    def __init__(self, message: str, code: Optional[int] = None, status_code: Optional[int] = None):
        super().__init__(message, status_code=status_code)
        if code is not None:
            self.code = code

    def body(self) -> Dict[str, Any]:
        return {
            "jsonrpc": "2.0",
            "error": {"code": self.code, "message": self.message},
            "id": None,
        }


class AuthenticationError(GatewayError):
    status_code = status.HTTP_401_UNAUTHORIZED


class SessionNotFoundError(JSONRPCGatewayError):
    status_code = status.HTTP_404_NOT_FOUND
    code = -32001

    def __init__(self):
        super().__init__("Session not found")


class InitializeRequiredError(JSONRPCGatewayError):
    def __init__(self):
        super().__init__("Invalid or missing session. Send an initialize request first.")


class MalformedEnvelopeError(JSONRPCGatewayError):
    """The request body is not a JSON-RPC message or batch."""


class InvalidSessionError(GatewayError):
    """GET or DELETE without a live session id."""

    def __init__(self):
        super().__init__("Invalid or missing session ID")


class MethodNotAllowedError(GatewayError):
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, method: str):
        super().__init__(f"Method {method} not allowed on the MCP endpoint")
