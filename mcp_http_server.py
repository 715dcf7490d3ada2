#!/usr/bin/env python3
"""
Feedbin MCP HTTP Server

Serves the Feedbin tools over MCP Streamable HTTP. Each client gets its own
session, created by an initialize request and identified by the
``mcp-session-id`` response header.

Usage:
    export FEEDBIN_EMAIL=... FEEDBIN_PASSWORD=... MCP_API_KEY=...
    python mcp_http_server.py

Endpoints:
- POST   /mcp    - JSON-RPC messages (Authorization: Bearer <MCP_API_KEY>)
- GET    /mcp    - Server-sent event stream for an existing session
- DELETE /mcp    - Terminate a session
- GET    /health - Liveness probe (no auth)
"""

import logging
import sys

import uvicorn

from feedbin_mcp.config import get_settings
from feedbin_mcp.core.errors import ConfigurationError
from feedbin_mcp.main import MCP_PATH, create_app

logger = logging.getLogger(__name__)


def run() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), stream=sys.stderr)

    try:
        app = create_app(settings)
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    logger.info(f"🌐 MCP endpoint: http://{settings.HOST}:{settings.PORT}{MCP_PATH}")
    logger.info(f"💚 Health check: http://{settings.HOST}:{settings.PORT}/health")

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
