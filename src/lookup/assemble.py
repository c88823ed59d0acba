"""Response assembly: merges extraction output and image selection."""

from __future__ import annotations

from datetime import datetime

from src.api.schemas import CarImage, PriceInfo, PriceLookupResponse
from src.lookup.currency import to_lakhs
from src.lookup.extract import utc_now_iso
from src.lookup.models import ExtractionRecord, ImageCandidate, SearchResult, first_urls

DEFAULT_BASIS = "ex-showroom (likely)"
DISCLAIMER = "Prices vary by city, taxes, and date; please verify with official sources."


def _image_payload(image: ImageCandidate | None) -> CarImage | None:
    if image is None:
        return None
    return CarImage(
        url=image.original_url or image.url,
        name=image.name,
        source=image.source_page,
    )


def assemble_response(
    query: str,
    record: ExtractionRecord,
    image: ImageCandidate | None,
    results: list[SearchResult],
    now: datetime | None = None,
) -> PriceLookupResponse:
    """Build the public payload, filling gaps in *record* with defaults."""
    return PriceLookupResponse(
        query=query,
        brand=record.brand,
        model=record.model or query,
        info=record.one_sentence_info,
        prices=PriceInfo(
            starting_inr=record.starting_price_inr,
            starting_lakhs=to_lakhs(record.starting_price_inr),
            top_inr=record.top_variant_price_inr,
            top_lakhs=to_lakhs(record.top_variant_price_inr),
            basis=record.basis or DEFAULT_BASIS,
        ),
        image=_image_payload(image),
        sources=list(record.sources) or first_urls(results),
        last_checked=record.last_checked or utc_now_iso(now),
        disclaimer=DISCLAIMER,
    )
