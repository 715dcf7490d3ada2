from functools import lru_cache
from typing import List, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "feedbin-mcp"

    # Feedbin account - required by both transports
    FEEDBIN_EMAIL: Optional[str] = Field(None, alias="FEEDBIN_EMAIL")
    FEEDBIN_PASSWORD: Optional[SecretStr] = Field(None, alias="FEEDBIN_PASSWORD")
    FEEDBIN_BASE_URL: str = Field("https://api.feedbin.com/v2", alias="FEEDBIN_BASE_URL")
    FEEDBIN_TIMEOUT: float = Field(30.0, alias="FEEDBIN_TIMEOUT")

    # Gateway auth - required for HTTP mode only
    MCP_API_KEY: Optional[SecretStr] = Field(None, alias="MCP_API_KEY")
    MCP_AUTH_ALLOW_QUERY_TOKEN: bool = Field(False, alias="MCP_AUTH_ALLOW_QUERY_TOKEN")
    MCP_JSON_RESPONSE: bool = Field(False, alias="MCP_JSON_RESPONSE")

    HOST: str = Field("0.0.0.0", alias="HOST")
    PORT: int = Field(3000, alias="PORT")
    ALLOWED_CORS_ORIGINS: str = Field("*", alias="ALLOWED_CORS_ORIGINS")
    LOG_LEVEL: str = Field("INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", populate_by_name=True, extra="ignore")

    @property
    def cors_origins_list(self) -> List[str]:
        if self.ALLOWED_CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.ALLOWED_CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return the process settings, read once from the environment."""
    return Settings()
