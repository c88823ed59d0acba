"""Tavily web search wrapper."""

from __future__ import annotations

import logging
from typing import Any

from tavily import AsyncTavilyClient

from src.lookup.errors import ProviderError
from src.lookup.models import ImageCandidate, SearchResult

logger = logging.getLogger(__name__)

PROVIDER = "Tavily"


class TavilySearch:
    """Web and image search via Tavily, restricted to results for India.

    Tavily does not expose thumbnails or image dimensions, so image candidates
    carry neither ``original_url`` nor ``width``.
    """

    def __init__(self, api_key: str, timeout: float = 20.0, max_results: int = 10) -> None:
        self._api_key = api_key
        self._client: AsyncTavilyClient | None = None
        self._timeout = timeout
        self._max_results = max_results

    async def _search(self, stage: str, query: str, **kwargs: Any) -> dict[str, Any]:
        logger.info("tavily request", extra={"stage": stage, "query": query})
        try:
            # The client rejects an empty key on construction
            if self._client is None:
                self._client = AsyncTavilyClient(api_key=self._api_key)
            return await self._client.search(
                query=query,
                max_results=self._max_results,
                topic="general",
                country="india",
                include_answer=False,
                timeout=int(self._timeout),
                **kwargs,
            )
        except Exception as exc:
            raise ProviderError(PROVIDER, stage, str(exc) or type(exc).__name__) from exc

    async def search_web(self, query: str) -> list[SearchResult]:
        response = await self._search("web_search", query)
        results = [
            SearchResult(
                name=item.get("title", ""),
                url=item.get("url", ""),
                snippet=item.get("content", ""),
            )
            for item in response.get("results", [])
            if item.get("title") and item.get("url")
        ]
        logger.debug("tavily web results", extra={"query": query, "result_count": len(results)})
        return results

    async def search_images(self, query: str) -> list[ImageCandidate]:
        response = await self._search(
            "image_search",
            query,
            include_images=True,
            include_image_descriptions=True,
        )
        candidates: list[ImageCandidate] = []
        for item in response.get("images", []):
            # Without descriptions Tavily returns bare URL strings
            if isinstance(item, str):
                url, name = item, query
            else:
                url, name = item.get("url", ""), item.get("description") or query
            if url and name:
                candidates.append(ImageCandidate(url=url, name=name))
        logger.debug("tavily image results", extra={"query": query, "result_count": len(candidates)})
        return candidates
