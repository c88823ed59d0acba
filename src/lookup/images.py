"""Choose a single representative image from an image search."""

from __future__ import annotations

from collections.abc import Sequence

from src.lookup.models import ImageCandidate


def pick_best_image(candidates: Sequence[ImageCandidate]) -> ImageCandidate | None:
    """Pick the image to show for a car.

    Preference: the first candidate with a full-resolution URL, then the
    widest candidate (earliest wins ties), then simply the first one.
    """
    if not candidates:
        return None

    for candidate in candidates:
        if candidate.original_url:
            return candidate

    widest: ImageCandidate | None = None
    for candidate in candidates:
        if candidate.width is None:
            continue
        if widest is None or candidate.width > (widest.width or 0):
            widest = candidate
    if widest is not None:
        return widest

    return candidates[0]
