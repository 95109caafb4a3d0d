"""Spacing, fraction and negation lookups."""

from __future__ import annotations

from zephyr.theme.model import Theme


def resolve_spacing(theme: Theme, key: str) -> str | None:
    """``"4"`` -> ``"1rem"``, ``"0.5"`` -> ``"0.125rem"``, ``"px"`` -> ``"1px"``."""
    return theme.spacing.get(key)


def fraction_percent(numerator: int, denominator: int) -> str:
    """``1/2`` -> ``"50%"``, ``1/3`` -> ``"33.333333%"``."""
    percent = round(numerator / denominator * 100, 6)
    text = f"{percent:.6f}".rstrip("0").rstrip(".")
    return f"{text}%"


def negate(value: str) -> str:
    """Negate a CSS length; zero stays zero, functions are wrapped in calc()."""
    if value in ("0", "0px", "0rem", "0%"):
        return value
    if value.startswith("-"):
        return value[1:]
    if value[0].isdigit() or value[0] == ".":
        return "-" + value
    return f"calc({value} * -1)"
