"""Lookup engine tests with stubbed providers."""

import asyncio

import pytest

from helpers import StubCompleter, StubSearch, make_results
from src.lookup.engine import PriceLookupEngine
from src.lookup.errors import ProviderError
from src.lookup.models import ImageCandidate, SearchResult
from src.providers.base import ProviderSet

pytestmark = pytest.mark.asyncio

NEXON_JSON = '{"brand": "Tata", "model": "Nexon", "starting_price_inr": 800000}'


def _engine(search: StubSearch, completer: StubCompleter) -> PriceLookupEngine:
    return PriceLookupEngine(ProviderSet(web=search, images=search, completer=completer))


async def test_lookup_tailors_queries_and_assembles():
    images = [
        ImageCandidate(url="https://img.example/a.jpg", name="A", width=300),
        ImageCandidate(url="https://img.example/b.jpg", name="B", width=1200),
    ]
    search = StubSearch(results=make_results(5), images=images)

    payload = await _engine(search, StubCompleter(NEXON_JSON)).lookup("Tata Nexon")

    assert search.web_queries == ["Tata Nexon price India variants ex-showroom"]
    assert search.image_queries == ["Tata Nexon car India"]
    assert payload.model == "Nexon"
    assert payload.prices.starting_lakhs == "8.00 lakhs"
    assert payload.image.url == "https://img.example/b.jpg"


async def test_searches_run_concurrently():
    web_started = asyncio.Event()
    image_started = asyncio.Event()

    class WaitingSearch(StubSearch):
        async def search_web(self, query: str) -> list[SearchResult]:
            web_started.set()
            await image_started.wait()
            return make_results(1)

        async def search_images(self, query: str) -> list[ImageCandidate]:
            image_started.set()
            await web_started.wait()
            return []

    engine = _engine(WaitingSearch(), StubCompleter(NEXON_JSON))
    payload = await asyncio.wait_for(engine.lookup("Tata Nexon"), timeout=2)
    assert payload.image is None


async def test_web_search_failure_propagates():
    search = StubSearch(web_error=ProviderError("SerpAPI", "web_search", "HTTP 401"))
    completer = StubCompleter(NEXON_JSON)
    with pytest.raises(ProviderError) as exc_info:
        await _engine(search, completer).lookup("Tata Nexon")
    assert exc_info.value.stage == "web_search"
    assert completer.calls == []


async def test_image_search_failure_propagates():
    search = StubSearch(results=make_results(2), image_error=ProviderError("SerpAPI", "image_search", "timeout"))
    with pytest.raises(ProviderError):
        await _engine(search, StubCompleter(NEXON_JSON)).lookup("Tata Nexon")


async def test_unparseable_completion_still_returns_payload():
    search = StubSearch(results=make_results(3))
    payload = await _engine(search, StubCompleter("not json at all")).lookup("Hyundai Creta")
    assert payload.model == "Hyundai Creta"
    assert payload.info == "Could not reliably extract details from sources."
    assert payload.prices.starting_inr is None
    assert payload.prices.basis == "ex-showroom (likely)"
    assert len(payload.sources) == 3
