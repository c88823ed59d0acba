"""Extraction engine: turns search snippets into an ExtractionRecord via an LLM."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Protocol

from pydantic import ValidationError

from src.lookup.models import ExtractionRecord, SearchResult, first_urls
from src.lookup.prompts import (
    EXTRACTION_SYSTEM_PROMPT,
    MAX_SNIPPETS,
    format_extraction_prompt,
)

logger = logging.getLogger(__name__)

FALLBACK_INFO = "Could not reliably extract details from sources."


class Completer(Protocol):
    """Hosted text-completion model configured to answer with a JSON object."""

    async def complete(self, system_prompt: str, user_prompt: str) -> str: ...


def utc_now_iso(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def fallback_record(query: str, results: list[SearchResult]) -> ExtractionRecord:
    """Deterministic record used when the model's answer cannot be parsed."""
    return ExtractionRecord(
        brand=None,
        model=query,
        one_sentence_info=FALLBACK_INFO,
        starting_price_inr=None,
        top_variant_price_inr=None,
        basis=None,
        sources=first_urls(results),
        last_checked=utc_now_iso(),
    )


def parse_extraction(text: str, query: str, results: list[SearchResult]) -> ExtractionRecord:
    """Parse the model's raw answer, falling back when it is not a JSON object."""
    raw = text.strip() or "{}"
    try:
        data = json.loads(raw)
    except ValueError:
        logger.warning(
            "extraction response was not valid JSON, using fallback",
            extra={"query": query, "response_chars": len(raw)},
        )
        return fallback_record(query, results)

    if not isinstance(data, dict):
        logger.warning(
            "extraction response was not a JSON object, using fallback",
            extra={"query": query, "json_type": type(data).__name__},
        )
        return fallback_record(query, results)

    try:
        return ExtractionRecord.model_validate(data)
    except ValidationError:
        logger.warning("extraction response failed validation, using fallback", extra={"query": query}, exc_info=True)
        return fallback_record(query, results)


class ExtractionEngine:
    """Builds the extraction prompt, calls the completer and parses its answer.

    Parse problems never escape: they produce the fallback record. Failures of
    the completer itself (transport, auth, timeout) propagate unchanged.
    """

    def __init__(self, completer: Completer) -> None:
        self._completer = completer

    async def extract(self, query: str, results: list[SearchResult]) -> ExtractionRecord:
        user_prompt = format_extraction_prompt(query, results)
        logger.debug(
            "requesting extraction",
            extra={"query": query, "snippets": min(len(results), MAX_SNIPPETS)},
        )
        text = await self._completer.complete(EXTRACTION_SYSTEM_PROMPT, user_prompt)
        record = parse_extraction(text or "", query, results)
        logger.info(
            "extraction completed",
            extra={
                "query": query,
                "brand": record.brand,
                "model": record.model,
                "has_starting_price": record.starting_price_inr is not None,
                "has_top_price": record.top_variant_price_inr is not None,
                "sources": len(record.sources),
            },
        )
        return record
