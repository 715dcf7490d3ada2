"""Shared fixtures: settings, a fake Feedbin API and the HTTP app."""

from typing import Any, Dict, Iterator, List, Optional, Tuple

import httpx
import pytest
from fastapi.testclient import TestClient

from feedbin_mcp.config import Settings
from feedbin_mcp.core.credentials import FeedbinCredentials
from feedbin_mcp.infrastructure.feedbin import FeedbinClient
from feedbin_mcp.main import create_app

API_KEY = "test-api-key"
FEEDBIN_BASE_URL = "https://api.feedbin.com/v2"
PROTOCOL_VERSION = "2025-03-26"

MCP_HEADERS = {
    "Authorization": f"Bearer {API_KEY}",
    "Accept": "application/json, text/event-stream",
    "Content-Type": "application/json",
}

INITIALIZE_REQUEST = {
    "jsonrpc": "2.0",
    "id": 1,
    "method": "initialize",
    "params": {
        "protocolVersion": PROTOCOL_VERSION,
        "capabilities": {},
        "clientInfo": {"name": "pytest", "version": "0.0.1"},
    },
}

INITIALIZED_NOTIFICATION = {"jsonrpc": "2.0", "method": "notifications/initialized"}


class FakeFeedbin:
    """Canned Feedbin responses keyed by method and path, recording every request."""

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], Dict[str, Any]] = {}

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self._routes[(method, f"/v2{path}")] = {
            "status_code": status_code,
            "json": json,
            "content": content,
            "headers": headers,
        }

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, text="Not Found")
        return httpx.Response(
            route["status_code"],
            json=route["json"],
            content=route["content"],
            headers=route["headers"],
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def make_settings(**overrides) -> Settings:
    values = {
        "FEEDBIN_EMAIL": "reader@example.com",
        "FEEDBIN_PASSWORD": "hunter2",
        "MCP_API_KEY": API_KEY,
        "MCP_JSON_RESPONSE": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def credentials() -> FeedbinCredentials:
    return FeedbinCredentials(email="reader@example.com", password="hunter2")


@pytest.fixture
def fake_feedbin() -> FakeFeedbin:
    return FakeFeedbin()


@pytest.fixture
def feedbin_client(credentials, fake_feedbin) -> FeedbinClient:
    return FeedbinClient(
        credentials,
        base_url=FEEDBIN_BASE_URL,
        transport=httpx.MockTransport(fake_feedbin.handler),
    )


@pytest.fixture
def app(settings, feedbin_client):
    return create_app(settings, client=feedbin_client)


@pytest.fixture
def http_client(app) -> Iterator[TestClient]:
    with TestClient(app) as client:
        yield client


def initialize_session(client: TestClient, **kwargs) -> str:
    """Open a session and complete the handshake; returns the session id."""
    response = client.post("/mcp", json=INITIALIZE_REQUEST, headers=MCP_HEADERS, **kwargs)
    assert response.status_code == 200, response.text
    session_id = response.headers["mcp-session-id"]

    ack = client.post(
        "/mcp",
        json=INITIALIZED_NOTIFICATION,
        headers=session_headers(session_id),
        **kwargs,
    )
    assert ack.status_code == 202, ack.text
    return session_id


def session_headers(session_id: str) -> Dict[str, str]:
    return {**MCP_HEADERS, "mcp-session-id": session_id, "mcp-protocol-version": PROTOCOL_VERSION}
