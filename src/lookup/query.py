"""Query sanitizing and India-market query tailoring."""

from typing import Any

MAX_QUERY_LENGTH = 80

WEB_QUERY_SUFFIX = "price India variants ex-showroom"
IMAGE_QUERY_SUFFIX = "car India"


def sanitize_query(raw: Any) -> str:
    """Trim the user-supplied car name and cap it at 80 characters."""
    text = "" if raw is None else str(raw)
    return text.strip()[:MAX_QUERY_LENGTH].rstrip()


def build_web_query(query: str) -> str:
    return f"{query} {WEB_QUERY_SUFFIX}"


def build_image_query(query: str) -> str:
    return f"{query} {IMAGE_QUERY_SUFFIX}"
