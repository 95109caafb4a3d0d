"""Breakpoint lookups (mobile-first, ascending min-width)."""

from __future__ import annotations

from zephyr.theme.model import Theme


def min_width(theme: Theme, name: str) -> int | None:
    return theme.breakpoints.get(name)


def min_width_query(theme: Theme, name: str) -> str | None:
    """``"md"`` -> ``"(min-width: 768px)"``."""
    width = theme.breakpoints.get(name)
    if width is None:
        return None
    return f"(min-width: {width}px)"


def ordered_breakpoints(theme: Theme) -> list[str]:
    return sorted(theme.breakpoints, key=lambda bp: (theme.breakpoints[bp], bp))


def breakpoint_rank(theme: Theme, name: str) -> int:
    """1-based position of *name* in ascending min-width order (0 if unknown)."""
    ordered = ordered_breakpoints(theme)
    return ordered.index(name) + 1 if name in ordered else 0
