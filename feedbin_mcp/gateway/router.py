"""
Session router for the ``/mcp`` endpoint.

Every request is authenticated, then dispatched to the session named by its
``mcp-session-id`` header. A POST without that header may only carry an
``initialize`` call: it gets a brand-new transport and protocol handler, and
the session enters the table only once its transport has accepted the
initialize request. A request that fails at any step is answered directly
and leaves the table untouched.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, Dict, Optional, Tuple
from uuid import uuid4

import anyio
from anyio.abc import TaskGroup, TaskStatus
from mcp.server import Server
from mcp.server.streamable_http import MCP_SESSION_ID_HEADER
from mcp.server.transport_security import TransportSecuritySettings
from starlette.requests import Request
from starlette.types import Message, Receive, Scope, Send

from feedbin_mcp.core.errors import (
    GatewayError,
    InitializeRequiredError,
    InvalidSessionError,
    MethodNotAllowedError,
    SessionCollisionError,
    SessionNotFoundError,
)
from feedbin_mcp.gateway.auth import BearerAuthenticator
from feedbin_mcp.gateway.session_table import SessionEntry, SessionTable
from feedbin_mcp.gateway.transport import SessionState, SessionTransport
from feedbin_mcp.schemas.mcp import InboundEnvelope

logger = logging.getLogger(__name__)


def _replay_body(body: bytes, receive: Receive) -> Receive:
    """Hand an already-consumed request body to the next reader."""
    replayed = False

    async def replay() -> Message:
        nonlocal replayed
        if not replayed:
            replayed = True
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return replay


class McpSessionRouter:
    """ASGI application multiplexing MCP sessions over one HTTP endpoint."""

    def __init__(
        self,
        authenticator: BearerAuthenticator,
        sessions: SessionTable,
        server_factory: Callable[[], Server],
        json_response: bool = False,
        security_settings: Optional[TransportSecuritySettings] = None,
    ):
        self.authenticator = authenticator
        self.sessions = sessions
        self._server_factory = server_factory
        self._json_response = json_response
        self._security_settings = security_settings
        self._pending: Dict[str, SessionEntry] = {}
        self._task_group: Optional[TaskGroup] = None

    @asynccontextmanager
    async def run(self) -> AsyncIterator[None]:
        """
        Own the tasks running each session's protocol handler.

        Enter this once from the application lifespan; leaving it stops every
        live session.
        """
        if self._task_group is not None:
            raise RuntimeError("McpSessionRouter.run() is already active")

        async with anyio.create_task_group() as tg:
            self._task_group = tg
            logger.info("🚀 MCP session router started")
            try:
                yield
            finally:
                logger.info(f"🛑 Stopping MCP session router with {len(self.sessions)} live session(s)")
                tg.cancel_scope.cancel()
                self._task_group = None

    def session_initialized(self, session_id: str) -> None:
        entry = self._pending.pop(session_id, None)
        if entry is None:
            return
        self.sessions.insert(entry)
        logger.info(f"✅ Session initialized: {session_id} ({len(self.sessions)} live)")

    def session_closed(self, session_id: str) -> None:
        if self._pending.pop(session_id, None) is not None:
            logger.info(f"🗑️ Discarded uninitialized session: {session_id}")
            return
        if self.sessions.remove(session_id) is not None:
            logger.info(f"👋 Session closed: {session_id} ({len(self.sessions)} live)")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        try:
            self.authenticator.authenticate(request)
            if request.method == "POST":
                entry, receive = await self._route_post(request, receive)
            elif request.method in ("GET", "DELETE"):
                entry = self._route_existing(request)
            else:
                raise MethodNotAllowedError(request.method)
        except GatewayError as e:
            logger.warning(f"🚫 {request.method} {request.url.path} rejected with {e.status_code}: {e.message}")
            await e.to_response()(scope, receive, send)
            return

        try:
            await entry.transport.handle_request(scope, receive, send)
        finally:
            if entry.state is SessionState.PENDING:
                logger.warning(f"⚠️ Session {entry.session_id} did not complete initialization")
                with anyio.CancelScope(shield=True):
                    await entry.transport.terminate()

    async def _route_post(self, request: Request, receive: Receive) -> Tuple[SessionEntry, Receive]:
        session_id = request.headers.get(MCP_SESSION_ID_HEADER)
        if session_id is not None:
            entry = self.sessions.lookup(session_id)
            if entry is None:
                raise SessionNotFoundError()
            return entry, receive

        body = await request.body()
        envelope = InboundEnvelope.parse(body)
        if not envelope.is_initialize:
            raise InitializeRequiredError()

        entry = await self._create_session()
        return entry, _replay_body(body, receive)

    def _route_existing(self, request: Request) -> SessionEntry:
        session_id = request.headers.get(MCP_SESSION_ID_HEADER)
        entry = self.sessions.lookup(session_id) if session_id else None
        if entry is None:
            raise InvalidSessionError()
        return entry

    async def _create_session(self) -> SessionEntry:
        if self._task_group is None:
            raise RuntimeError("McpSessionRouter is not running; enter run() from the app lifespan")

        session_id = str(uuid4())
        if session_id in self.sessions or session_id in self._pending:
            raise SessionCollisionError(session_id)

        transport = SessionTransport(
            session_id,
            observer=self,
            json_response=self._json_response,
            security_settings=self._security_settings,
        )
        entry = SessionEntry(session_id=session_id, transport=transport, server=self._server_factory())
        self._pending[session_id] = entry

        await self._task_group.start(self._run_session, entry)
        logger.info(f"🆕 Session created: {session_id}")
        return entry

    async def _run_session(
        self,
        entry: SessionEntry,
        *,
        task_status: TaskStatus[None] = anyio.TASK_STATUS_IGNORED,
    ) -> None:
        try:
            async with entry.transport.connect() as (read_stream, write_stream):
                task_status.started()
                try:
                    await entry.server.run(
                        read_stream,
                        write_stream,
                        entry.server.create_initialization_options(),
                        stateless=False,
                    )
                except Exception:
                    logger.exception(f"💥 Session {entry.session_id} crashed")
        finally:
            entry.transport.close()
