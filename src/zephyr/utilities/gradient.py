"""Gradient stops and directions.

These classes never emit declarations directly: they resolve to a
:class:`CompositionPart` that the composition context merges with sibling
classes sharing the same variants.  The declarations carried alongside are
the per-stop fallbacks used when no direction ever arrives.
"""

from __future__ import annotations

from zephyr.model.resolution import CompositionPart, Declaration, UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, color

GRADIENT = "gradient"

STOP_SLOTS = ("from", "via", "to")

SIDES = {
    "t": "top",
    "tr": "top right",
    "r": "right",
    "br": "bottom right",
    "b": "bottom",
    "bl": "bottom left",
    "l": "left",
    "tl": "top left",
}

POSITIONS = {
    "center": "center",
    "t": "top",
    "tr": "top right",
    "r": "right",
    "br": "bottom right",
    "b": "bottom",
    "bl": "bottom left",
    "l": "left",
    "tl": "top left",
}

LINEAR = "linear-gradient"
RADIAL = "radial-gradient"
CONIC = "conic-gradient"


def stop_property(slot: str) -> str:
    return f"--gradient-{slot}"


def _direction(direction: str, function: str) -> UtilityResolution:
    return UtilityResolution(
        composition=CompositionPart(GRADIENT, "direction", direction, function=function)
    )


def resolve_stop(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix not in STOP_SLOTS:
        return None
    value = color(req)
    if value is None:
        return None
    return UtilityResolution(
        properties=(Declaration(stop_property(req.prefix), value),),
        composition=CompositionPart(GRADIENT, req.prefix, value),
    )


def resolve_direction(req: UtilityRequest) -> UtilityResolution | None:
    """``bg-gradient-to-r``, ``bg-linear-45``, ``bg-radial-at-t``, ``bg-conic``."""
    if req.opacity is not None or req.negative:
        return None
    if req.prefix in ("bg-gradient-to", "bg-linear-to"):
        side = SIDES.get(req.value) if not req.spec.is_arbitrary else None
        return _direction(f"to {side}", LINEAR) if side else None
    if req.prefix == "bg-linear":
        if req.arbitrary is not None:
            return _direction(req.arbitrary, LINEAR)
        if req.value.isdigit() and 0 <= int(req.value) <= 360:
            return _direction(f"{req.value}deg", LINEAR)
        return None
    if req.prefix == "bg-radial":
        if req.is_bare:
            return _direction("circle at center", RADIAL)
        if req.arbitrary is not None:
            return _direction(req.arbitrary, RADIAL)
        position = _at_position(req.value)
        return _direction(f"ellipse at {position}", RADIAL) if position else None
    if req.prefix == "bg-conic":
        if req.is_bare:
            return _direction("from 0deg at center", CONIC)
        if req.arbitrary is not None:
            return _direction(req.arbitrary, CONIC)
        position = _at_position(req.value)
        return _direction(f"from 0deg at {position}", CONIC) if position else None
    return None


def _at_position(value: str) -> str | None:
    if not value.startswith("at-"):
        return None
    return POSITIONS.get(value[len("at-"):])


FAMILIES = [
    UtilityFamily("gradient-stop", STOP_SLOTS, resolve_stop, opacity=True),
    UtilityFamily(
        "gradient-direction",
        ("bg-gradient-to", "bg-linear-to", "bg-linear", "bg-radial", "bg-conic"),
        resolve_direction,
    ),
]
