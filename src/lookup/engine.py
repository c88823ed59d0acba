"""Lookup engine: search -> extract -> assemble pipeline orchestrator."""

from __future__ import annotations

import asyncio
import logging
import time

from src.api.schemas import PriceLookupResponse
from src.lookup.assemble import assemble_response
from src.lookup.extract import ExtractionEngine
from src.lookup.images import pick_best_image
from src.lookup.query import build_image_query, build_web_query
from src.providers.base import ProviderSet

logger = logging.getLogger(__name__)


class PriceLookupEngine:
    """Runs one price lookup for an already sanitized car name.

    Web and image searches run concurrently; extraction waits for the web
    results only. Provider failures propagate as ``ProviderError``.
    """

    def __init__(self, providers: ProviderSet) -> None:
        self._providers = providers
        self._extractor = ExtractionEngine(providers.completer)

    async def lookup(self, query: str) -> PriceLookupResponse:
        started = time.perf_counter()
        logger.info("price lookup started", extra={"query": query})

        results, images = await asyncio.gather(
            self._providers.web.search_web(build_web_query(query)),
            self._providers.images.search_images(build_image_query(query)),
        )
        logger.info(
            "search completed",
            extra={"query": query, "web_results": len(results), "image_results": len(images)},
        )

        best_image = pick_best_image(images)
        record = await self._extractor.extract(query, results)
        response = assemble_response(query, record, best_image, results)

        logger.info(
            "price lookup completed",
            extra={
                "query": query,
                "model": response.model,
                "has_image": response.image is not None,
                "duration_ms": round((time.perf_counter() - started) * 1000),
            },
        )
        return response
