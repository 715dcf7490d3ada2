"""Helpers turning Feedbin payloads into MCP tool content."""

import json
from typing import Any, List

from mcp.types import TextContent


def format_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def text_result(text: str) -> List[TextContent]:
    return [TextContent(type="text", text=text)]


def json_result(data: Any) -> List[TextContent]:
    return text_result(format_json(data))
