"""Font, text and line utilities."""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import (
    UtilityFamily,
    UtilityRequest,
    declare,
    keyword_family,
    lookup,
)
from zephyr.values.arbitrary import looks_like_length

TEXT_ALIGN = ("left", "center", "right", "justify", "start", "end")

TEXT_WRAP = ("wrap", "nowrap", "balance", "pretty")

TEXT_OVERFLOW = {"ellipsis": "ellipsis", "clip": "clip"}

STYLES = {
    "italic": (("font-style", "italic"),),
    "not-italic": (("font-style", "normal"),),
    "uppercase": (("text-transform", "uppercase"),),
    "lowercase": (("text-transform", "lowercase"),),
    "capitalize": (("text-transform", "capitalize"),),
    "normal-case": (("text-transform", "none"),),
    "underline": (("text-decoration-line", "underline"),),
    "overline": (("text-decoration-line", "overline"),),
    "line-through": (("text-decoration-line", "line-through"),),
    "no-underline": (("text-decoration-line", "none"),),
    "truncate": (
        ("overflow", "hidden"),
        ("text-overflow", "ellipsis"),
        ("white-space", "nowrap"),
    ),
    "antialiased": (
        ("-webkit-font-smoothing", "antialiased"),
        ("-moz-osx-font-smoothing", "grayscale"),
    ),
    "subpixel-antialiased": (
        ("-webkit-font-smoothing", "auto"),
        ("-moz-osx-font-smoothing", "auto"),
    ),
    "break-normal": (("overflow-wrap", "normal"), ("word-break", "normal")),
    "break-words": (("overflow-wrap", "break-word"),),
    "break-all": (("word-break", "break-all"),),
    "break-keep": (("word-break", "keep-all"),),
}

WHITESPACE = ("normal", "nowrap", "pre", "pre-line", "pre-wrap", "break-spaces")


def resolve_text(req: UtilityRequest) -> UtilityResolution | None:
    """``text-lg``, ``text-center``, ``text-[14px]``; colors fall through."""
    if req.prefix != "text":
        return None
    if req.arbitrary is not None:
        if looks_like_length(req.arbitrary):
            return declare(("font-size", req.arbitrary))
        return None
    if req.spec.is_arbitrary or req.spec.is_fraction:
        return None
    size = req.theme.font_size.get(req.value)
    if size is not None:
        font_size, line_height = size
        return declare(("font-size", font_size), ("line-height", line_height))
    if req.value in TEXT_ALIGN:
        return declare(("text-align", req.value))
    if req.value in TEXT_WRAP:
        return declare(("text-wrap", req.value))
    if req.value in TEXT_OVERFLOW:
        return declare(("text-overflow", TEXT_OVERFLOW[req.value]))
    return None


def resolve_font(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "font":
        return None
    arbitrary = req.arbitrary
    if arbitrary is not None:
        if arbitrary.isdigit():
            return declare(("font-weight", arbitrary))
        return declare(("font-family", arbitrary))
    if req.spec.is_arbitrary or req.spec.is_fraction:
        return None
    weight = req.theme.font_weight.get(req.value)
    if weight is not None:
        return declare(("font-weight", weight))
    family = req.theme.font_family.get(req.value)
    if family is not None:
        return declare(("font-family", family))
    return None


def resolve_leading(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "leading":
        return None
    value = lookup(req, req.theme.line_height)
    return declare(("line-height", value)) if value is not None else None


def resolve_tracking(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "tracking":
        return None
    value = lookup(req, req.theme.letter_spacing)
    return declare(("letter-spacing", value)) if value is not None else None


def resolve_whitespace(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "whitespace" or req.value not in WHITESPACE:
        return None
    return declare(("white-space", req.value))


FAMILIES = [
    UtilityFamily("text", ("text",), resolve_text, priority=10),
    UtilityFamily("font", ("font",), resolve_font),
    UtilityFamily("leading", ("leading",), resolve_leading),
    UtilityFamily("tracking", ("tracking",), resolve_tracking),
    UtilityFamily("whitespace", ("whitespace",), resolve_whitespace),
    keyword_family("text-style", STYLES),
]
