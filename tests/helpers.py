"""Test doubles for search providers and completers."""

from __future__ import annotations

from src.lookup.models import ImageCandidate, SearchResult


class StubSearch:
    """In-memory web + image search; pass an exception to simulate a failure."""

    def __init__(
        self,
        results: list[SearchResult] | None = None,
        images: list[ImageCandidate] | None = None,
        web_error: Exception | None = None,
        image_error: Exception | None = None,
    ) -> None:
        self.results = results or []
        self.images = images or []
        self.web_error = web_error
        self.image_error = image_error
        self.web_queries: list[str] = []
        self.image_queries: list[str] = []

    async def search_web(self, query: str) -> list[SearchResult]:
        self.web_queries.append(query)
        if self.web_error:
            raise self.web_error
        return self.results

    async def search_images(self, query: str) -> list[ImageCandidate]:
        self.image_queries.append(query)
        if self.image_error:
            raise self.image_error
        return self.images


class StubCompleter:
    def __init__(self, text: str = "{}", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error:
            raise self.error
        return self.text


def make_results(count: int) -> list[SearchResult]:
    return [
        SearchResult(
            name=f"Tata Nexon price {i}",
            url=f"https://example{i}.in/tata-nexon",
            snippet=f"Nexon starts at Rs 8 lakh (snippet {i})",
            display_url=f"example{i}.in",
        )
        for i in range(1, count + 1)
    ]
