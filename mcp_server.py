#!/usr/bin/env python3
"""
Feedbin MCP Server

A Model Context Protocol server exposing the Feedbin API as tools:
- Subscriptions and feeds
- Entries, unread and starred state
- Tags, saved searches and OPML imports

Runs a single session over stdio. Logs go to stderr; stdout carries the
protocol.
"""

import asyncio
import logging
import sys

from mcp.server.stdio import stdio_server

from feedbin_mcp.config import get_settings
from feedbin_mcp.core.credentials import load_credentials
from feedbin_mcp.core.errors import ConfigurationError
from feedbin_mcp.domain.services import create_server
from feedbin_mcp.infrastructure.feedbin import FeedbinClient
from feedbin_mcp.tools import TOOL_REGISTRY

logger = logging.getLogger(__name__)


async def main(client: FeedbinClient) -> None:
    server = create_server(client)
    logger.info(f"🚀 Feedbin MCP server running on stdio with {len(TOOL_REGISTRY)} tools")
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await client.aclose()


def run() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), stream=sys.stderr)

    try:
        credentials = load_credentials(settings)
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    client = FeedbinClient(credentials, base_url=settings.FEEDBIN_BASE_URL, timeout=settings.FEEDBIN_TIMEOUT)
    asyncio.run(main(client))


if __name__ == "__main__":
    run()
