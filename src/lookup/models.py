"""Domain models shared by the adapters, extraction and assembly steps."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

MAX_SOURCES = 4


@dataclass(frozen=True)
class SearchResult:
    name: str
    url: str
    snippet: str = ""
    display_url: str = ""


@dataclass(frozen=True)
class ImageCandidate:
    """A single image hit, normalized across providers.

    ``original_url`` is only set by providers that distinguish a full-size
    image from its thumbnail; ``url`` is always the best displayable URL.
    """

    url: str
    name: str
    source_page: str = ""
    width: int | None = None
    original_url: str | None = None


def first_urls(results: list[SearchResult], limit: int = MAX_SOURCES) -> list[str]:
    """Return the first *limit* distinct result URLs in order."""
    urls: list[str] = []
    for result in results:
        if result.url and result.url not in urls:
            urls.append(result.url)
        if len(urls) >= limit:
            break
    return urls


class ExtractionRecord(BaseModel):
    """Price record produced by the extraction step.

    Values coming back from the model are accepted field by field: anything
    missing or of the wrong type becomes ``None`` (or ``[]`` for sources)
    instead of failing the whole record.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    brand: str | None = None
    model: str | None = None
    one_sentence_info: str | None = None
    starting_price_inr: int | None = None
    top_variant_price_inr: int | None = None
    basis: str | None = Field(default=None, alias="ex_showroom_or_on_road")
    sources: list[str] = Field(default_factory=list)
    last_checked: str | None = None

    @field_validator(
        "brand", "model", "one_sentence_info", "basis", "last_checked", mode="before"
    )
    @classmethod
    def _text_or_none(cls, value: Any) -> str | None:
        if not isinstance(value, str):
            return None
        return value.strip() or None

    @field_validator("starting_price_inr", "top_variant_price_inr", mode="before")
    @classmethod
    def _rupees_or_none(cls, value: Any) -> int | None:
        return coerce_rupees(value)

    @field_validator("sources", mode="before")
    @classmethod
    def _clean_sources(cls, value: Any) -> list[str]:
        if not isinstance(value, list):
            return []
        urls: list[str] = []
        for item in value:
            if isinstance(item, str) and item.strip() and item.strip() not in urls:
                urls.append(item.strip())
        return urls[:MAX_SOURCES]


def coerce_rupees(value: Any) -> int | None:
    """Interpret *value* as a positive rupee amount, or return ``None``.

    Accepts ints, floats and numeric strings (thousands separators allowed).
    Booleans, zero, negatives, NaN, infinities and ints too large for a float
    are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(",", "").strip()
        if not value:
            return None
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(amount) or amount <= 0:
        return None
    return int(round(amount))
