from .mcp_service import SERVER_NAME, create_server

__all__ = ["SERVER_NAME", "create_server"]
