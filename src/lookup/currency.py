"""Rupee formatting helpers."""

from __future__ import annotations

from typing import Any

from src.lookup.models import coerce_rupees

RUPEES_PER_LAKH = 100_000


def to_lakhs(rupees: Any) -> str | None:
    """Render a rupee amount as ``"X.XX lakhs"``; ``None`` if not a usable amount."""
    amount = coerce_rupees(rupees)
    if amount is None:
        return None
    return f"{amount / RUPEES_PER_LAKH:.2f} lakhs"
