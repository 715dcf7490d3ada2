import pytest

from feedbin_mcp.config import Settings
from feedbin_mcp.core.credentials import load_credentials, require_api_key
from feedbin_mcp.core.errors import ConfigurationError
from feedbin_mcp.main import create_app

from conftest import make_settings


def test_defaults():
    settings = make_settings()

    assert settings.PORT == 3000
    assert settings.FEEDBIN_BASE_URL == "https://api.feedbin.com/v2"
    assert settings.MCP_AUTH_ALLOW_QUERY_TOKEN is False
    assert settings.cors_origins_list == ["*"]


def test_cors_origins_are_split():
    settings = make_settings(ALLOWED_CORS_ORIGINS="https://a.example, https://b.example,")

    assert settings.cors_origins_list == ["https://a.example", "https://b.example"]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("MCP_AUTH_ALLOW_QUERY_TOKEN", "true")

    settings = Settings(_env_file=None)

    assert settings.PORT == 8080
    assert settings.MCP_AUTH_ALLOW_QUERY_TOKEN is True


def test_credentials_loaded():
    credentials = load_credentials(make_settings())

    assert credentials.email == "reader@example.com"
    assert credentials.password.get_secret_value() == "hunter2"
    assert "hunter2" not in repr(credentials)


@pytest.mark.parametrize("missing", ["FEEDBIN_EMAIL", "FEEDBIN_PASSWORD"])
def test_missing_credentials_are_fatal(missing):
    with pytest.raises(ConfigurationError) as exc_info:
        load_credentials(make_settings(**{missing: None}))

    assert "FEEDBIN_EMAIL and FEEDBIN_PASSWORD" in str(exc_info.value)


def test_missing_api_key_is_fatal():
    with pytest.raises(ConfigurationError):
        require_api_key(make_settings(MCP_API_KEY=None))


def test_http_app_refuses_to_build_without_api_key(feedbin_client):
    with pytest.raises(ConfigurationError):
        create_app(make_settings(MCP_API_KEY=None), client=feedbin_client)
