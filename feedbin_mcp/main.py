"""
FastAPI application for the Feedbin MCP server over Streamable HTTP.

Exposes ``/mcp`` (authenticated, session-multiplexed MCP traffic) and
``/health`` (unauthenticated liveness probe).
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from mcp.server.streamable_http import MCP_SESSION_ID_HEADER

from feedbin_mcp import __version__
from feedbin_mcp.config import Settings, get_settings
from feedbin_mcp.core.credentials import load_credentials, require_api_key
from feedbin_mcp.domain.services import create_server
from feedbin_mcp.gateway import BearerAuthenticator, McpSessionRouter, SessionTable
from feedbin_mcp.infrastructure.feedbin import FeedbinClient
from feedbin_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from feedbin_mcp.routes import health_router

logger = logging.getLogger(__name__)

MCP_PATH = "/mcp"


def create_app(settings: Optional[Settings] = None, client: Optional[FeedbinClient] = None) -> FastAPI:
    """
    Build the HTTP application.

    Args:
        settings: Process settings (read from the environment if omitted)
        client: Feedbin client to share across sessions (built from settings if omitted)

    Returns:
        The configured FastAPI app; run it with its lifespan enabled

    Raises:
        ConfigurationError: If the API key or Feedbin credentials are missing
    """
    settings = settings or get_settings()
    authenticator = BearerAuthenticator(
        require_api_key(settings),
        allow_query_token=settings.MCP_AUTH_ALLOW_QUERY_TOKEN,
    )
    if client is None:
        client = FeedbinClient(
            load_credentials(settings),
            base_url=settings.FEEDBIN_BASE_URL,
            timeout=settings.FEEDBIN_TIMEOUT,
        )

    session_table = SessionTable()
    mcp_router = McpSessionRouter(
        authenticator,
        session_table,
        server_factory=lambda: create_server(client),
        json_response=settings.MCP_JSON_RESPONSE,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"🚀 {settings.APP_NAME} {__version__} serving MCP at {MCP_PATH}")
        try:
            async with mcp_router.run():
                yield
        finally:
            await client.aclose()
            logger.info("👋 Feedbin client closed")

    app = FastAPI(
        title="Feedbin MCP Server",
        description="Model Context Protocol server for the Feedbin API over Streamable HTTP",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.session_table = session_table
    app.state.mcp_router = mcp_router

    # Order matters - last added is outermost
    app.add_middleware(LoggingMiddleware, enable_detailed_logging=settings.LOG_LEVEL.upper() == "DEBUG")
    app.add_middleware(ErrorHandlingMiddleware, enable_error_logging=True)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[MCP_SESSION_ID_HEADER],
    )

    app.include_router(health_router)
    app.add_route(MCP_PATH, mcp_router, methods=["GET", "POST", "DELETE"], include_in_schema=False)

    return app
