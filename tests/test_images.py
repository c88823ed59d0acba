"""Best-image selection tests."""

from src.lookup.images import pick_best_image
from src.lookup.models import ImageCandidate


def _img(name: str, width: int | None = None, original: str | None = None) -> ImageCandidate:
    return ImageCandidate(
        url=f"https://img.example/{name}-thumb.jpg",
        name=name,
        source_page=f"https://example.in/{name}",
        width=width,
        original_url=original,
    )


def test_empty_returns_none():
    assert pick_best_image([]) is None


def test_widest_candidate_wins():
    small, large = _img("small", width=100), _img("large", width=500)
    assert pick_best_image([small, large]) is large


def test_first_widest_wins_ties():
    first, second = _img("first", width=800), _img("second", width=800)
    assert pick_best_image([_img("tiny", width=10), first, second]) is first


def test_original_preferred_over_width():
    wide = _img("wide", width=4000)
    with_original = _img("orig", width=200, original="https://img.example/orig.jpg")
    assert pick_best_image([wide, with_original]) is with_original


def test_first_original_wins():
    a = _img("a", original="https://img.example/a.jpg")
    b = _img("b", width=9999, original="https://img.example/b.jpg")
    assert pick_best_image([a, b]) is a


def test_falls_back_to_first_without_widths():
    a, b = _img("a"), _img("b")
    assert pick_best_image([a, b]) is a


def test_unknown_widths_ignored_when_some_known():
    unknown, known = _img("unknown"), _img("known", width=50)
    assert pick_best_image([unknown, known]) is known


def test_selection_is_deterministic():
    images = [_img("a", width=300), _img("b", width=600)]
    assert pick_best_image(images) == pick_best_image(list(images))
