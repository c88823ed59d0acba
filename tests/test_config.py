"""Settings tests."""

import pytest
from pydantic import ValidationError

from src.config import Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


def test_defaults(monkeypatch):
    for name in ("PORT", "REQUEST_TIMEOUT_SECONDS", "SEARCH_PROVIDER", "LLM_PROVIDER", "LLM_TEMPERATURE", "LLM_TOP_P"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.request_timeout_seconds == 20.0
    assert settings.search_provider == "serpapi"
    assert settings.llm_provider == "openai"
    assert settings.llm_temperature == 0.2
    assert settings.llm_top_p == 0.9


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("SERP_API_KEY", "from-env")
    monkeypatch.setenv("PORT", "9090")
    settings = Settings(_env_file=None)
    assert settings.serp_api_key == "from-env"
    assert settings.port == 9090


def test_settings_are_frozen():
    settings = _settings()
    with pytest.raises(ValidationError):
        settings.port = 1


def test_missing_credentials_serpapi_openai():
    missing = _settings(search_provider="serpapi", serp_api_key="", llm_provider="openai", openai_api_key="").missing_credentials()
    assert missing == ["SERP_API_KEY", "OPENAI_API_KEY"]


def test_missing_credentials_tavily_azure():
    settings = _settings(
        search_provider="tavily",
        tavily_api_key="k",
        llm_provider="azure",
        azure_openai_api_key="k",
        azure_openai_endpoint="",
        azure_openai_deployment="gpt-4o-mini",
    )
    assert settings.missing_credentials() == ["AZURE_OPENAI_ENDPOINT"]


def test_missing_credentials_agent_provider(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    settings = _settings(serp_api_key="s", llm_provider="anthropic")
    assert settings.missing_credentials() == ["ANTHROPIC_API_KEY"]

    monkeypatch.setenv("ANTHROPIC_API_KEY", "a")
    assert settings.missing_credentials() == []


def test_no_missing_credentials():
    settings = _settings(serp_api_key="s", openai_api_key="o")
    assert settings.missing_credentials() == []
