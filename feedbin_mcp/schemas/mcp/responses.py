"""
Response models for the Feedbin MCP HTTP server.

Only the non-protocol endpoints use these; MCP traffic is answered by the
session transports.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class MCPResponse(BaseModel):
    """Base response model."""
    success: bool = Field(..., description="Whether the operation was successful")
    message: Optional[str] = Field(None, description="Optional message about the operation")
    timestamp: datetime = Field(default_factory=datetime.now, description="Response timestamp")


class ErrorResponse(MCPResponse):
    """Response model for unexpected server errors."""
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error message")
    error_code: Optional[str] = Field(None, description="Optional error code")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")


class HealthResponse(BaseModel):
    """Liveness probe payload."""
    status: str = Field("ok", description="Always 'ok' while the process serves requests")
    server: str = Field(..., description="Server name")
    version: str = Field(..., description="Server version")
    sessions: int = Field(..., description="Number of live MCP sessions")
