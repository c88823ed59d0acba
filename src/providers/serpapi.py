"""SerpAPI adapter: Google web and Google Images results for the Indian market."""

from __future__ import annotations

import logging
from typing import Any

from src.lookup.models import ImageCandidate, SearchResult
from src.providers.base import get_json

logger = logging.getLogger(__name__)

PROVIDER = "SerpAPI"

_LOCALE_PARAMS = {"gl": "in", "hl": "en", "safe": "active"}


def _parse_width(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None


def parse_organic_results(data: dict[str, Any]) -> list[SearchResult]:
    items = data.get("organic_results")
    if not isinstance(items, list):
        return []
    results: list[SearchResult] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        name = item.get("title") or ""
        url = item.get("link") or ""
        if not name or not url:
            continue
        results.append(
            SearchResult(
                name=name,
                url=url,
                snippet=item.get("snippet") or "",
                display_url=item.get("displayed_link") or "",
            )
        )
    return results


def parse_image_results(data: dict[str, Any]) -> list[ImageCandidate]:
    items = data.get("images_results")
    if not isinstance(items, list):
        return []
    candidates: list[ImageCandidate] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        original = item.get("original") or None
        url = original or item.get("thumbnail") or ""
        name = item.get("title") or ""
        if not url or not name:
            continue
        candidates.append(
            ImageCandidate(
                url=url,
                name=name,
                source_page=item.get("link") or item.get("source") or "",
                width=_parse_width(item.get("original_width")),
                original_url=original,
            )
        )
    return candidates


class SerpApiSearch:
    """Web and image search through SerpAPI's ``search.json`` endpoint."""

    def __init__(
        self,
        api_key: str,
        url: str = "https://serpapi.com/search.json",
        timeout: float = 20.0,
    ) -> None:
        self._api_key = api_key
        self._url = url
        self._timeout = timeout

    async def search_web(self, query: str) -> list[SearchResult]:
        params = {
            "engine": "google",
            "q": query,
            "google_domain": "google.co.in",
            "num": 10,
            "api_key": self._api_key,
            **_LOCALE_PARAMS,
        }
        logger.info("serpapi request", extra={"engine": "google", "query": query})
        data = await get_json(PROVIDER, "web_search", self._url, params=params, timeout=self._timeout)
        results = parse_organic_results(data)
        logger.debug("serpapi web results", extra={"query": query, "result_count": len(results)})
        return results

    async def search_images(self, query: str) -> list[ImageCandidate]:
        params = {
            "engine": "google_images",
            "q": query,
            "ijn": 0,
            "api_key": self._api_key,
            **_LOCALE_PARAMS,
        }
        logger.info("serpapi request", extra={"engine": "google_images", "query": query})
        data = await get_json(PROVIDER, "image_search", self._url, params=params, timeout=self._timeout)
        candidates = parse_image_results(data)
        logger.debug("serpapi image results", extra={"query": query, "result_count": len(candidates)})
        return candidates
