"""Translate, rotate, scale, skew and transform-origin utilities.

Translate, scale and skew write per-axis custom properties read by one shared
composite value, so ``translate-x`` and ``translate-y`` on the same element
combine instead of overriding each other.
"""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, declare, keyword_family, length

_TRANSLATE_KEYWORDS = {"full": "100%", "px": "1px"}

SKEW = ("0", "1", "2", "3", "6", "12")

TRANSLATE = "var(--translate-x, 0) var(--translate-y, 0)"
SCALE = "var(--scale-x, 100%) var(--scale-y, 100%)"
SKEW_TRANSFORM = "var(--skew-x,) var(--skew-y,)"

ORIGIN = {
    f"origin-{name}": (("transform-origin", value),)
    for name, value in {
        "center": "center",
        "top": "top",
        "top-right": "top right",
        "right": "right",
        "bottom-right": "bottom right",
        "bottom": "bottom",
        "bottom-left": "bottom left",
        "left": "left",
        "top-left": "top left",
    }.items()
}


def _degrees(req: UtilityRequest, allowed: tuple[str, ...]) -> str | None:
    if req.arbitrary is not None:
        value = req.arbitrary
    elif req.value in allowed and not req.spec.is_fraction:
        value = f"{req.value}deg"
    else:
        return None
    if req.negative and value not in ("0deg",):
        value = value[1:] if value.startswith("-") else f"-{value}"
    return value


def resolve_translate(req: UtilityRequest) -> UtilityResolution | None:
    axis = {"translate-x": "x", "translate-y": "y"}.get(req.prefix)
    if axis is None:
        return None
    value = length(req, keywords=_TRANSLATE_KEYWORDS)
    if value is None:
        return None
    return declare((f"--translate-{axis}", value), ("translate", TRANSLATE))


def resolve_rotate(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "rotate":
        return None
    value = _degrees(req, req.theme.rotate)
    return declare(("rotate", value)) if value is not None else None


def resolve_scale(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix not in ("scale", "scale-x", "scale-y"):
        return None
    if req.arbitrary is not None:
        value = req.arbitrary
    elif req.value in req.theme.scale and not req.spec.is_fraction:
        value = f"{req.value}%"
    else:
        return None
    if req.negative:
        value = f"calc({value} * -1)"
    if req.prefix == "scale":
        return declare(("--scale-x", value), ("--scale-y", value), ("scale", SCALE))
    return declare((f"--{req.prefix}", value), ("scale", SCALE))


def resolve_skew(req: UtilityRequest) -> UtilityResolution | None:
    func = {"skew-x": "skewX", "skew-y": "skewY"}.get(req.prefix)
    if func is None:
        return None
    value = _degrees(req, SKEW)
    if value is None:
        return None
    return declare((f"--{req.prefix}", f"{func}({value})"), ("transform", SKEW_TRANSFORM))


FAMILIES = [
    UtilityFamily("translate", ("translate-x", "translate-y"), resolve_translate, negative=True),
    UtilityFamily("rotate", ("rotate",), resolve_rotate, negative=True),
    UtilityFamily("scale", ("scale", "scale-x", "scale-y"), resolve_scale, negative=True),
    UtilityFamily("skew", ("skew-x", "skew-y"), resolve_skew, negative=True),
    keyword_family("transform-origin", ORIGIN),
]
