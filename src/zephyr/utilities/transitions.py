"""Transition property, duration, easing and delay utilities, plus animations."""

from __future__ import annotations

from zephyr.model.resolution import Declaration, UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, declare, lookup

_COLORS = (
    "color, background-color, border-color, text-decoration-color, fill, stroke"
)

TRANSITION_PROPERTIES: dict[str, str] = {
    "": f"{_COLORS}, opacity, box-shadow, translate, scale, rotate, transform",
    "all": "all",
    "colors": _COLORS,
    "opacity": "opacity",
    "shadow": "box-shadow",
    "transform": "translate, scale, rotate, transform",
}

DEFAULT_TIMING = "in-out"
DEFAULT_DURATION = "150"


def resolve_transition(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "transition":
        return None
    if req.value == "none" and not req.spec.is_arbitrary:
        return declare(("transition-property", "none"))
    props = lookup(req, TRANSITION_PROPERTIES)
    if props is None:
        return None
    return declare(
        ("transition-property", props),
        ("transition-timing-function", _timing(req)),
        ("transition-duration", _duration(req)),
    )


def _timing(req: UtilityRequest) -> str:
    fallback = req.theme.timing_function.get(DEFAULT_TIMING, "ease")
    return f"var(--transition-ease, {fallback})"


def _duration(req: UtilityRequest) -> str:
    fallback = req.theme.duration.get(DEFAULT_DURATION, "150ms")
    return f"var(--transition-duration, {fallback})"


def resolve_timing(req: UtilityRequest) -> UtilityResolution | None:
    """``duration-*`` and ``ease-*`` feed the variables ``transition`` reads."""
    if req.prefix not in ("duration", "delay", "ease"):
        return None
    table = req.theme.timing_function if req.prefix == "ease" else req.theme.duration
    value = lookup(req, table)
    if value is None:
        return None
    if req.prefix == "delay":
        return declare(("transition-delay", value))
    if req.prefix == "ease":
        return declare(("--transition-ease", value), ("transition-timing-function", _timing(req)))
    return declare(("--transition-duration", value), ("transition-duration", _duration(req)))


def resolve_animate(req: UtilityRequest) -> UtilityResolution | None:
    """``animate-<name>``; the keyframes the animation names ride along."""
    if req.prefix != "animate":
        return None
    value = lookup(req, req.theme.animation)
    if value is None:
        return None
    name = value.partition(" ")[0]
    return UtilityResolution(
        properties=(Declaration("animation", value),),
        keyframes=(name,) if name in req.theme.keyframes else (),
    )


FAMILIES = [
    UtilityFamily("transition", ("transition",), resolve_transition),
    UtilityFamily("transition-timing", ("duration", "delay", "ease"), resolve_timing),
    UtilityFamily("animation", ("animate",), resolve_animate),
]
