"""Feedbin account credentials, built once at startup and injected into the client."""

import base64

from pydantic import BaseModel, ConfigDict, SecretStr

from feedbin_mcp.config import Settings
from feedbin_mcp.core.errors import ConfigurationError


class FeedbinCredentials(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str
    password: SecretStr

    def basic_auth_header(self) -> str:
        raw = f"{self.email}:{self.password.get_secret_value()}".encode("utf-8")
        return f"Basic {base64.b64encode(raw).decode('ascii')}"


def load_credentials(settings: Settings) -> FeedbinCredentials:
    """
    Build the credential record from settings.

    Raises:
        ConfigurationError: If the email or password is missing
    """
    email = settings.FEEDBIN_EMAIL
    password = settings.FEEDBIN_PASSWORD
    if not email or password is None or not password.get_secret_value():
        raise ConfigurationError(
            "FEEDBIN_EMAIL and FEEDBIN_PASSWORD environment variables are required.\n"
            "Set them before starting the server:\n"
            "  export FEEDBIN_EMAIL=you@example.com\n"
            "  export FEEDBIN_PASSWORD=your-password"
        )
    return FeedbinCredentials(email=email, password=password)


def require_api_key(settings: Settings) -> str:
    """
    Return the gateway bearer secret.

    Raises:
        ConfigurationError: If MCP_API_KEY is missing
    """
    api_key = settings.MCP_API_KEY.get_secret_value() if settings.MCP_API_KEY else ""
    if not api_key:
        raise ConfigurationError(
            "MCP_API_KEY environment variable is required for HTTP mode.\n"
            "This is the bearer token clients must provide to access your server.\n"
            'Generate one with: python -c "import secrets; print(secrets.token_hex(32))"'
        )
    return api_key
