"""
Feedbin tool catalog.

Every MCP session registers the same fixed registry built here.
"""

from .content import content_tools
from .entries import entry_tools
from .organization import organization_tools
from .reading import reading_tools
from .registry import ToolDefinition, ToolGroup, ToolRegistry
from .subscriptions import subscription_tools

TOOL_REGISTRY = ToolRegistry(
    [
        *subscription_tools,
        *entry_tools,
        *reading_tools,
        *organization_tools,
        *content_tools,
    ]
)

__all__ = ["TOOL_REGISTRY", "ToolDefinition", "ToolGroup", "ToolRegistry"]
