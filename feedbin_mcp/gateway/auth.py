"""Bearer-token authentication for the MCP endpoint."""

import hmac
import logging
from typing import Optional

from fastapi import Request, status

from feedbin_mcp.core.errors import AuthenticationError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
QUERY_TOKEN_PARAM = "token"


class BearerAuthenticator:
    """
    Accepts a request iff it presents the configured secret.

    By default the secret must arrive as ``Authorization: Bearer <token>``.
    With ``allow_query_token`` a ``?token=<token>`` query parameter is accepted
    as well, for clients that cannot set headers.
    """

    def __init__(self, api_key: str, allow_query_token: bool = False):
        if not api_key:
            raise ValueError("api_key must be a non-empty string")
        self._api_key = api_key.encode("utf-8")
        self.allow_query_token = allow_query_token

    @property
    def missing_credentials_message(self) -> str:
        if self.allow_query_token:
            return (
                "Missing or invalid credentials. "
                "Use: Authorization: Bearer <MCP_API_KEY> or ?token=<MCP_API_KEY>"
            )
        return "Missing or invalid Authorization header. Use: Bearer <MCP_API_KEY>"

    def presented_token(self, request: Request) -> Optional[str]:
        header = request.headers.get("authorization")
        if header and header.startswith(BEARER_PREFIX):
            return header[len(BEARER_PREFIX):]
        if self.allow_query_token:
            return request.query_params.get(QUERY_TOKEN_PARAM)
        return None

    def authenticate(self, request: Request) -> None:
        """
        Check the request's credential.

        Raises:
            AuthenticationError: 401 if no credential is presented, 403 if it is wrong
        """
        token = self.presented_token(request)
        if token is None:
            raise AuthenticationError(self.missing_credentials_message)
        if not hmac.compare_digest(token.encode("utf-8"), self._api_key):
            raise AuthenticationError("Invalid API key", status_code=status.HTTP_403_FORBIDDEN)
