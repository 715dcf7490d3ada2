"""
Utility modules for the Feedbin MCP server.
"""

from .formatting import format_json, json_result, text_result

__all__ = ["format_json", "json_result", "text_result"]
