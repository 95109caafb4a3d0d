"""Value resolvers: pure lookups from scale keys to CSS values."""

from zephyr.values.arbitrary import (
    MalformedValueError,
    looks_like_color,
    looks_like_length,
    normalize_arbitrary,
    validate_arbitrary,
)
from zephyr.values.breakpoints import (
    breakpoint_rank,
    min_width,
    min_width_query,
    ordered_breakpoints,
)
from zephyr.values.color import apply_opacity, format_alpha, hex_to_rgb, resolve_color
from zephyr.values.spacing import fraction_percent, negate, resolve_spacing

__all__ = [
    "MalformedValueError",
    "validate_arbitrary",
    "normalize_arbitrary",
    "looks_like_color",
    "looks_like_length",
    "min_width",
    "min_width_query",
    "ordered_breakpoints",
    "breakpoint_rank",
    "resolve_color",
    "apply_opacity",
    "format_alpha",
    "hex_to_rgb",
    "resolve_spacing",
    "fraction_percent",
    "negate",
]
