"""
MCP (Model Context Protocol) schemas package.

This package contains the Pydantic models for tool arguments, the inbound
JSON-RPC envelope, and the non-protocol HTTP responses.
"""

from .envelope import EnvelopeMessage, InboundEnvelope
from .responses import ErrorResponse, HealthResponse, MCPResponse

__all__ = [
    # Envelope
    "EnvelopeMessage",
    "InboundEnvelope",
    # Responses
    "MCPResponse",
    "ErrorResponse",
    "HealthResponse",
]
