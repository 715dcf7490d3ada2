"""Async client for the Feedbin v2 REST API."""
import httpx
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from feedbin_mcp.core.credentials import FeedbinCredentials
from feedbin_mcp.core.errors import CredentialsNotConfiguredError, FeedbinAPIError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.feedbin.com/v2"

ParamValue = Union[str, int, float, bool, None]


@dataclass(frozen=True)
class FeedbinResponse:
    """Decoded Feedbin response."""
    data: Any
    status_code: int
    headers: httpx.Headers


class FeedbinClient:
    """
    HTTP client for the Feedbin API.

    One instance is shared by every session. It holds the read-only
    credential record and an httpx connection pool, nothing else.
    """

    def __init__(
        self,
        credentials: Optional[FeedbinCredentials],
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            credentials: Feedbin account credentials
            base_url: API root, without trailing slash
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used to fake Feedbin in tests)
        """
        self._credentials = credentials
        self._base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    def _get_headers(self, content_type: Optional[str] = None) -> Dict[str, str]:
        """Build request headers with Basic auth."""
        if self._credentials is None:
            raise CredentialsNotConfiguredError()
        headers = {"Authorization": self._credentials.basic_auth_header()}
        if content_type:
            headers["Content-Type"] = content_type
        return headers

    @staticmethod
    def _encode_params(params: Optional[Mapping[str, ParamValue]]) -> Dict[str, str]:
        """Drop unset values and encode booleans the way Feedbin expects."""
        encoded: Dict[str, str] = {}
        for key, value in (params or {}).items():
            if value is None:
                continue
            if isinstance(value, bool):
                encoded[key] = "true" if value else "false"
            else:
                encoded[key] = str(value)
        return encoded

    async def request(
        self,
        path: str,
        method: str = "GET",
        params: Optional[Mapping[str, ParamValue]] = None,
        json: Any = None,
        content: Optional[Union[str, bytes]] = None,
        content_type: Optional[str] = None,
    ) -> FeedbinResponse:
        """
        Call a Feedbin endpoint.

        Args:
            path: Endpoint path relative to the API root, e.g. "/entries.json"
            method: HTTP method
            params: Query parameters; None values are skipped
            json: JSON body
            content: Raw body, sent with content_type
            content_type: Content type for a raw body

        Returns:
            FeedbinResponse with the decoded body (None for 204)

        Raises:
            CredentialsNotConfiguredError: If no credentials were injected
            FeedbinAPIError: On any non-success status other than 300
        """
        if content is None and json is not None and content_type is None:
            content_type = "application/json; charset=utf-8"
        headers = self._get_headers(content_type)

        kwargs: Dict[str, Any] = {"params": self._encode_params(params), "headers": headers}
        if content is not None:
            kwargs["content"] = content
        elif json is not None:
            kwargs["json"] = json

        url = f"{self._base_url}{path}"
        logger.debug(f"➡️ Feedbin {method} {path}")
        try:
            response = await self.client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"HTTP request to Feedbin failed: {e}")
            raise

        # 300 is how Feedbin answers a subscribe that matches several feeds
        if not response.is_success and response.status_code != 300:
            logger.warning(f"⚠️ Feedbin API error {response.status_code} for {method} {path}")
            raise FeedbinAPIError(response.status_code, response.reason_phrase, response.text)

        if response.status_code == 204 or not response.content:
            return FeedbinResponse(data=None, status_code=response.status_code, headers=response.headers)

        return FeedbinResponse(data=response.json(), status_code=response.status_code, headers=response.headers)

    async def aclose(self):
        """Close the HTTP client."""
        await self.client.aclose()
