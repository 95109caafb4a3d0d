"""Pull candidate class strings out of text."""

from __future__ import annotations

from typing import Iterable


def extract_classes(text: str) -> list[str]:
    """Split *text* on whitespace, keeping first-seen order and dropping duplicates."""
    seen: dict[str, None] = {}
    for candidate in text.split():
        seen.setdefault(candidate, None)
    return list(seen)


def extract_from_sources(sources: Iterable[str]) -> list[str]:
    """:func:`extract_classes` across several texts, deduplicated."""
    return extract_classes(" ".join(sources))
