"""
MCP protocol handler factory.

Builds one isolated ``mcp.server.Server`` per session (or one for the stdio
transport) with the Feedbin tool registry registered on it.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx
from mcp.server import Server
from mcp.types import CallToolResult, TextContent, Tool
from pydantic import ValidationError

from feedbin_mcp import __version__
from feedbin_mcp.core.errors import FeedbinAPIError
from feedbin_mcp.infrastructure.feedbin import FeedbinClient
from feedbin_mcp.tools import TOOL_REGISTRY, ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "feedbin"


def _error_result(message: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=message)], isError=True)


def create_server(client: FeedbinClient, registry: Optional[ToolRegistry] = None) -> Server:
    """
    Create a protocol handler with every Feedbin tool registered.

    Args:
        client: Shared Feedbin client carrying the account credentials
        registry: Tool catalog to expose (defaults to the full Feedbin registry)

    Returns:
        A fresh Server instance; nothing in it is shared with other sessions
    """
    tools = registry if registry is not None else TOOL_REGISTRY
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> List[Tool]:
        return tools.list_tools()

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: Dict[str, Any]):
        logger.info(f"🔧 Tool called: {name}")
        definition = tools.get(name)
        if definition is None:
            return _error_result(f"Unknown tool: {name}")

        try:
            return await definition.invoke(client, arguments)
        except ValidationError as e:
            return _error_result(f"Invalid arguments for {name}: {e}")
        except FeedbinAPIError as e:
            logger.warning(f"⚠️ Tool {name} failed upstream: {e}")
            return _error_result(str(e))
        except httpx.HTTPError as e:
            logger.error(f"❌ Tool {name} could not reach Feedbin: {e}")
            return _error_result(f"Error executing {name}: {e}")

    return server
