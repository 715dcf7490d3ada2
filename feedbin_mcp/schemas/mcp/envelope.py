"""
Typed view of an inbound JSON-RPC body.

The gateway only needs to know whether a body without a session id carries
an ``initialize`` call, so messages are discriminated by their ``method``
field and everything else is passed through untouched.
"""

import json
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from feedbin_mcp.core.errors import MalformedEnvelopeError

INITIALIZE_METHOD = "initialize"

JSONRPC_PARSE_ERROR = -32700
JSONRPC_INVALID_REQUEST = -32600


class EnvelopeMessage(BaseModel):
    """One JSON-RPC request, notification or response."""
    model_config = ConfigDict(extra="allow")

    jsonrpc: Optional[str] = None
    method: Optional[str] = None


_messages_adapter = TypeAdapter(Union[EnvelopeMessage, List[EnvelopeMessage]])


class InboundEnvelope(BaseModel):
    messages: List[EnvelopeMessage]
    is_batch: bool = False

    @classmethod
    def parse(cls, body: bytes) -> "InboundEnvelope":
        """
        Parse a raw request body.

        Raises:
            MalformedEnvelopeError: If the body is not JSON, or not a message or batch
        """
        try:
            raw = json.loads(body)
        except ValueError as e:
            raise MalformedEnvelopeError(f"Parse error: {e}", code=JSONRPC_PARSE_ERROR)

        try:
            parsed = _messages_adapter.validate_python(raw)
        except ValidationError:
            raise MalformedEnvelopeError(
                "Invalid Request: body must be a JSON-RPC message or batch",
                code=JSONRPC_INVALID_REQUEST,
            )

        if isinstance(parsed, list):
            return cls(messages=parsed, is_batch=True)
        return cls(messages=[parsed])

    @property
    def is_initialize(self) -> bool:
        return any(message.method == INITIALIZE_METHOD for message in self.messages)
