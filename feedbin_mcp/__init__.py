"""Feedbin MCP server: Feedbin API tools over stdio or session-multiplexed Streamable HTTP."""

__version__ = "1.0.0"
