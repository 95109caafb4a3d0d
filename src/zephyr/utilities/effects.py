"""Opacity and box-shadow utilities."""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, declare
from zephyr.values.color import format_alpha

# Ring and shadow utilities both write this stack, each filling its own layer.
SHADOW_STACK = "var(--ring-shadow, 0 0 #0000), var(--shadow, 0 0 #0000)"


def resolve_opacity(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "opacity":
        return None
    if req.arbitrary is not None:
        return declare(("opacity", req.arbitrary))
    if req.value not in req.theme.opacity_steps:
        return None
    return declare(("opacity", format_alpha(int(req.value))))


def resolve_shadow(req: UtilityRequest) -> UtilityResolution | None:
    """Named shadow sizes; ``shadow-<color>`` falls through to the color family."""
    if req.prefix != "shadow":
        return None
    if req.spec.is_arbitrary or req.spec.is_fraction:
        return None
    value = req.theme.box_shadow.get(req.value)
    if value is None:
        return None
    return declare(("--shadow", value), ("box-shadow", SHADOW_STACK))


FAMILIES = [
    UtilityFamily("opacity", ("opacity",), resolve_opacity),
    UtilityFamily("box-shadow", ("shadow",), resolve_shadow, priority=10),
]
