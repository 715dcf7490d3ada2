"""
Health endpoint for the Feedbin MCP HTTP server.

Unauthenticated liveness probe reporting the number of live MCP sessions.
"""

from fastapi import APIRouter, Request

from feedbin_mcp import __version__
from feedbin_mcp.schemas.mcp import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint."""
    settings = request.app.state.settings
    return HealthResponse(
        server=settings.APP_NAME,
        version=__version__,
        sessions=len(request.app.state.session_table),
    )
