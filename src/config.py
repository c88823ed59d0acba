"""Pydantic Settings: loads configuration from environment variables."""

import os
from functools import lru_cache

from pydantic_settings import BaseSettings

# PydanticAI reads these from the process environment, not from Settings
AGENT_PROVIDER_KEYS = {
    "anthropic": "ANTHROPIC_API_KEY",
    "google-gla": "GEMINI_API_KEY",
    "groq": "GROQ_API_KEY",
    "mistral": "MISTRAL_API_KEY",
    "cohere": "CO_API_KEY",
    "deepseek": "DEEPSEEK_API_KEY",
}


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore", "frozen": True}

    search_provider: str = "serpapi"
    serp_api_key: str = ""
    serpapi_url: str = "https://serpapi.com/search.json"
    tavily_api_key: str = ""

    llm_provider: str = "openai"
    llm_model: str = "gpt-4o-mini"
    openai_api_key: str = ""
    azure_openai_api_key: str = ""
    azure_openai_endpoint: str = ""
    azure_openai_deployment: str = ""
    azure_openai_api_version: str = "2024-06-01"
    llm_temperature: float = 0.2
    llm_top_p: float = 0.9
    llm_max_tokens: int = 500

    request_timeout_seconds: float = 20.0
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"
    log_format: str = "json"

    def missing_credentials(self) -> list[str]:
        """Env vars the selected providers need but that are unset."""
        required: dict[str, str] = {}
        search_provider = self.search_provider.lower()
        if search_provider == "serpapi":
            required["SERP_API_KEY"] = self.serp_api_key
        elif search_provider == "tavily":
            required["TAVILY_API_KEY"] = self.tavily_api_key

        llm_provider = self.llm_provider.lower()
        if llm_provider == "openai":
            required["OPENAI_API_KEY"] = self.openai_api_key
        elif llm_provider == "azure":
            required["AZURE_OPENAI_API_KEY"] = self.azure_openai_api_key
            required["AZURE_OPENAI_ENDPOINT"] = self.azure_openai_endpoint
            required["AZURE_OPENAI_DEPLOYMENT"] = self.azure_openai_deployment
        elif llm_provider in AGENT_PROVIDER_KEYS:
            env_name = AGENT_PROVIDER_KEYS[llm_provider]
            required[env_name] = os.environ.get(env_name, "")

        return [name for name, value in required.items() if not value]


@lru_cache
def get_settings() -> Settings:
    return Settings()
