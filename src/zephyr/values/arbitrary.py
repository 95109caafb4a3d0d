"""Arbitrary value validator: bracket balance plus a character safelist.

The grammar in ``arbitrary.lark`` accepts numbers, units, ``%``, ``#``,
identifiers, function calls such as ``calc()`` and ``var()``, arithmetic
operators, commas and whitespace.  Anything else (quotes, ``;``, braces,
``:``) is rejected so an arbitrary value can never break out of its
declaration.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark
from lark.exceptions import LarkError

__all__ = [
    "MalformedValueError",
    "validate_arbitrary",
    "normalize_arbitrary",
    "looks_like_color",
    "looks_like_length",
]

GRAMMAR_PATH = Path(__file__).parent / "arbitrary.lark"

_COLOR_PREFIXES = ("#", "rgb(", "rgba(", "hsl(", "hsla(", "hwb(", "oklch(", "oklab(", "lab(", "lch(", "color-mix(")
_LENGTH_RE = re.compile(
    r"^-?(?:\d+\.?\d*|\.\d+)(?:px|rem|em|%|vh|vw|svh|lvh|dvh|vmin|vmax|ch|ex|lh|pt|pc|cm|mm|in|fr)?$"
)
_LENGTH_FUNCS = ("calc(", "min(", "max(", "clamp(", "var(")


class MalformedValueError(ValueError):
    """Raised when an arbitrary value fails validation."""

    def __init__(self, message: str, column: int | None = None) -> None:
        self.column = column
        super().__init__(message)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(encoding="utf-8"), parser="lalr", start="start")


def validate_arbitrary(text: str) -> str:
    """Validate the inside of ``[...]``; returns *text* unchanged on success."""
    if not text.strip():
        raise MalformedValueError("Arbitrary value is empty")
    try:
        _parser().parse(text)
    except LarkError as e:
        column = getattr(e, "column", None)
        where = f" at column {column}" if column else ""
        raise MalformedValueError(
            f"Invalid arbitrary value [{text}]{where}", column=column
        ) from e
    return text


def normalize_arbitrary(text: str) -> str:
    """Turn a validated arbitrary value into a CSS value (``_`` means space)."""
    return text.replace("_", " ").strip()


def looks_like_color(value: str) -> bool:
    return value.lower().startswith(_COLOR_PREFIXES)


def looks_like_length(value: str) -> bool:
    return bool(_LENGTH_RE.match(value)) or value.startswith(_LENGTH_FUNCS)
