from feedbin_mcp.gateway.auth import BearerAuthenticator
from feedbin_mcp.gateway.router import McpSessionRouter
from feedbin_mcp.gateway.session_table import SessionEntry, SessionTable
from feedbin_mcp.gateway.transport import SessionObserver, SessionState, SessionTransport

__all__ = [
    "BearerAuthenticator",
    "McpSessionRouter",
    "SessionEntry",
    "SessionObserver",
    "SessionState",
    "SessionTable",
    "SessionTransport",
]
