"""Provider capability protocols and the per-process provider set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from src.lookup.errors import ProviderError
from src.lookup.extract import Completer
from src.lookup.models import ImageCandidate, SearchResult


class WebSearchProvider(Protocol):
    """Protocol for web search backends."""

    async def search_web(self, query: str) -> list[SearchResult]: ...


class ImageSearchProvider(Protocol):
    """Protocol for image search backends."""

    async def search_images(self, query: str) -> list[ImageCandidate]: ...


@dataclass(frozen=True)
class ProviderSet:
    """The three capabilities a lookup needs, chosen once at startup."""

    web: WebSearchProvider
    images: ImageSearchProvider
    completer: Completer


def describe_http_error(exc: Exception) -> str:
    """Prefer the provider's response body over the bare exception text."""
    if isinstance(exc, httpx.HTTPStatusError):
        body = exc.response.text.strip()
        return f"HTTP {exc.response.status_code}: {body[:500]}" if body else str(exc)
    if isinstance(exc, httpx.TimeoutException):
        return f"timed out ({type(exc).__name__})"
    return str(exc) or type(exc).__name__


async def get_json(
    provider: str,
    stage: str,
    url: str,
    *,
    params: dict[str, Any],
    headers: dict[str, str] | None = None,
    timeout: float,
) -> dict[str, Any]:
    """GET *url* and decode a JSON object, raising ProviderError on any failure."""
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            resp = await client.get(url, params=params, headers=headers)
            resp.raise_for_status()
            data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        raise ProviderError(provider, stage, describe_http_error(exc)) from exc
    if not isinstance(data, dict):
        raise ProviderError(provider, stage, "response was not a JSON object")
    return data
