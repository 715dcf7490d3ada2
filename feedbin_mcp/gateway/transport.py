"""
Per-session transport.

Wraps the MCP SDK's Streamable HTTP transport for one session and reports
its lifecycle to an observer through exactly two events, each raised at most
once: ``session_initialized`` when the transport accepts the initialize
request, and ``session_closed`` when the session ends for any reason.
"""

import logging
from enum import Enum
from typing import Optional, Protocol

from mcp.server.streamable_http import MCP_SESSION_ID_HEADER, StreamableHTTPServerTransport
from mcp.server.transport_security import TransportSecuritySettings
from starlette.types import Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

_SESSION_HEADER_BYTES = MCP_SESSION_ID_HEADER.encode("latin-1")


class SessionState(str, Enum):
    PENDING = "pending-initialization"
    ACTIVE = "active"
    CLOSED = "closed"


class SessionObserver(Protocol):
    def session_initialized(self, session_id: str) -> None: ...

    def session_closed(self, session_id: str) -> None: ...


class SessionTransport:
    """
    Streamable HTTP transport owned by exactly one session.

    The state only moves forward: pending-initialization -> active -> closed,
    or straight to closed if initialization never completes.
    """

    def __init__(
        self,
        session_id: str,
        observer: SessionObserver,
        json_response: bool = False,
        security_settings: Optional[TransportSecuritySettings] = None,
    ):
        self.session_id = session_id
        self.state = SessionState.PENDING
        self._observer = observer
        self._http = StreamableHTTPServerTransport(
            mcp_session_id=session_id,
            is_json_response_enabled=json_response,
            security_settings=security_settings,
        )

    @property
    def is_terminated(self) -> bool:
        return self._http.is_terminated

    def connect(self):
        """Open the read/write streams the protocol handler runs on."""
        return self._http.connect()

    async def handle_request(self, scope: Scope, receive: Receive, send: Send) -> None:
        if self.state is SessionState.PENDING:
            send = self._watch_initialization(send)

        await self._http.handle_request(scope, receive, send)

        # A DELETE terminates the SDK transport from inside handle_request
        if self._http.is_terminated:
            self.close()

    async def terminate(self) -> None:
        if not self._http.is_terminated:
            await self._http.terminate()
        self.close()

    def close(self) -> None:
        if self.state is SessionState.CLOSED:
            return
        self.state = SessionState.CLOSED
        self._observer.session_closed(self.session_id)

    def _watch_initialization(self, send: Send) -> Send:
        """Raise ``session_initialized`` before the accepting response head goes out."""

        async def watched_send(message: Message) -> None:
            if (
                self.state is SessionState.PENDING
                and message["type"] == "http.response.start"
                and 200 <= message["status"] < 300
                and any(name.lower() == _SESSION_HEADER_BYTES for name, _ in message.get("headers", []))
            ):
                self.state = SessionState.ACTIVE
                self._observer.session_initialized(self.session_id)
            await send(message)

        return watched_send
