"""Search and completion backends, selected from settings at startup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .agent_chat import AgentCompleter
from .base import ImageSearchProvider, ProviderSet, WebSearchProvider
from .openai_chat import OpenAIChatCompleter, azure_completer, openai_completer
from .serpapi import SerpApiSearch
from .tavily import TavilySearch

if TYPE_CHECKING:
    from src.config import Settings
    from src.lookup.extract import Completer

__all__ = [
    "AgentCompleter",
    "ImageSearchProvider",
    "OpenAIChatCompleter",
    "ProviderSet",
    "SerpApiSearch",
    "TavilySearch",
    "WebSearchProvider",
    "build_completer",
    "build_providers",
    "build_search",
]

logger = logging.getLogger(__name__)


def build_search(settings: Settings) -> SerpApiSearch | TavilySearch:
    """Build the web+image search backend named by ``SEARCH_PROVIDER``."""
    provider = settings.search_provider.lower()
    timeout = settings.request_timeout_seconds
    if provider == "serpapi":
        return SerpApiSearch(settings.serp_api_key, url=settings.serpapi_url, timeout=timeout)
    if provider == "tavily":
        return TavilySearch(settings.tavily_api_key, timeout=timeout)
    raise ValueError(f"Unsupported search provider: {settings.search_provider!r}")


def build_completer(settings: Settings) -> Completer:
    """Build the completion backend named by ``LLM_PROVIDER``.

    ``openai`` and ``azure`` use the OpenAI SDK directly (JSON mode); any
    other value is treated as a PydanticAI provider prefix.
    """
    provider = settings.llm_provider.lower()
    sampling = dict(
        timeout=settings.request_timeout_seconds,
        temperature=settings.llm_temperature,
        top_p=settings.llm_top_p,
        max_tokens=settings.llm_max_tokens,
    )
    if provider == "openai":
        return openai_completer(settings.openai_api_key, settings.llm_model, **sampling)
    if provider == "azure":
        return azure_completer(
            settings.azure_openai_api_key,
            settings.azure_openai_endpoint,
            settings.azure_openai_deployment,
            settings.azure_openai_api_version,
            **sampling,
        )
    return AgentCompleter(f"{provider}:{settings.llm_model}", **sampling)


def build_providers(settings: Settings) -> ProviderSet:
    search = build_search(settings)
    completer = build_completer(settings)
    logger.info(
        "providers configured",
        extra={
            "search_provider": settings.search_provider,
            "llm_provider": settings.llm_provider,
            "llm_model": settings.llm_model,
        },
    )
    return ProviderSet(web=search, images=search, completer=completer)
