"""Prompt templates for the price extraction step."""

from __future__ import annotations

from src.lookup.models import SearchResult

MAX_SNIPPETS = 8

EXTRACTION_SYSTEM_PROMPT = """\
You are an automotive price extractor for India.

Objective: From the given web search snippets and page URLs, extract:
- brand (manufacturer)
- model (trim without year suffix)
- one_sentence_info (12-24 words, neutral tone)
- starting_price_inr (integer rupees, ex-showroom India preferred)
- top_variant_price_inr (integer rupees, ex-showroom India preferred)
- ex_showroom_or_on_road ("ex-showroom" or "on-road", add the city if clear)
- sources: array of up to 4 credible URLs used (manufacturer, Autocar India, \
ZigWheels, CarWale, GaadiWaadi, RushLane preferred)
- last_checked: ISO 8601 timestamp of now (UTC)

If prices conflict, choose the most credible source: the manufacturer source \
outranks a large auto-publication source, which outranks any other source.
If you are uncertain about a price, emit null for it rather than guessing.
Return ONLY a JSON object with these keys. No markdown.
"""

EXTRACTION_USER_PROMPT = """\
Car Query: "{query}"

Search Results:
{snippets}
"""


def format_snippets(results: list[SearchResult], limit: int = MAX_SNIPPETS) -> str:
    blocks = [
        f"#{i} {r.name}\nURL: {r.url}\n{r.snippet}"
        for i, r in enumerate(results[:limit], start=1)
    ]
    return "\n\n".join(blocks)


def format_extraction_prompt(query: str, results: list[SearchResult]) -> str:
    return EXTRACTION_USER_PROMPT.format(
        query=query,
        snippets=format_snippets(results),
    ).strip()
