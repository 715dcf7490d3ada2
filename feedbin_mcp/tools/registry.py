"""
Tool definitions and the read-only registry shared by every session.

A tool is a name, a description, a pydantic model for its arguments and an
async handler that turns validated arguments into one Feedbin call.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Type

from mcp.types import TextContent, Tool
from pydantic import BaseModel

from feedbin_mcp.infrastructure.feedbin import FeedbinClient
from feedbin_mcp.schemas.mcp.requests import NoArguments

ToolHandler = Callable[[FeedbinClient, Any], Awaitable[List[TextContent]]]


@dataclass(frozen=True)
class ToolDefinition:
    name: str
    description: str
    arguments_model: Type[BaseModel]
    handler: ToolHandler

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.arguments_model.model_json_schema(),
        )

    async def invoke(self, client: FeedbinClient, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
        """
        Validate arguments and run the handler.

        Raises:
            pydantic.ValidationError: If the arguments do not match the model
        """
        validated = self.arguments_model.model_validate(arguments or {})
        return await self.handler(client, validated)


class ToolGroup:
    """Collects the tools of one module through a decorator."""

    def __init__(self, name: str):
        self.name = name
        self.definitions: List[ToolDefinition] = []

    def tool(
        self,
        name: str,
        description: str,
        arguments_model: Type[BaseModel] = NoArguments,
    ) -> Callable[[ToolHandler], ToolHandler]:
        def decorator(func: ToolHandler) -> ToolHandler:
            self.definitions.append(ToolDefinition(name, description, arguments_model, func))
            return func

        return decorator

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self.definitions)


class ToolRegistry:
    """Fixed catalog of tools, keyed by name."""

    def __init__(self, definitions: Iterable[ToolDefinition]):
        tools: Dict[str, ToolDefinition] = {}
        for definition in definitions:
            if definition.name in tools:
                raise ValueError(f"Duplicate tool name: {definition.name}")
            tools[definition.name] = definition
        self._tools: Mapping[str, ToolDefinition] = MappingProxyType(tools)

    def get(self, name: str) -> Optional[ToolDefinition]:
        return self._tools.get(name)

    def names(self) -> List[str]:
        return list(self._tools)

    def list_tools(self) -> List[Tool]:
        return [definition.to_tool() for definition in self._tools.values()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
