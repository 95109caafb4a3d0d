"""Background attachment, clip, repeat, size and position utilities."""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, declare

BACKGROUND: dict[str, tuple[str, str]] = {
    "fixed": ("background-attachment", "fixed"),
    "local": ("background-attachment", "local"),
    "scroll": ("background-attachment", "scroll"),
    "clip-border": ("background-clip", "border-box"),
    "clip-padding": ("background-clip", "padding-box"),
    "clip-content": ("background-clip", "content-box"),
    "clip-text": ("background-clip", "text"),
    "repeat": ("background-repeat", "repeat"),
    "no-repeat": ("background-repeat", "no-repeat"),
    "repeat-x": ("background-repeat", "repeat-x"),
    "repeat-y": ("background-repeat", "repeat-y"),
    "repeat-round": ("background-repeat", "round"),
    "repeat-space": ("background-repeat", "space"),
    "auto": ("background-size", "auto"),
    "cover": ("background-size", "cover"),
    "contain": ("background-size", "contain"),
    "center": ("background-position", "center"),
    "top": ("background-position", "top"),
    "bottom": ("background-position", "bottom"),
    "left": ("background-position", "left"),
    "right": ("background-position", "right"),
    "left-top": ("background-position", "left top"),
    "left-bottom": ("background-position", "left bottom"),
    "right-top": ("background-position", "right top"),
    "right-bottom": ("background-position", "right bottom"),
    "none": ("background-image", "none"),
}


def resolve_background(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "bg" or req.spec.is_arbitrary or req.spec.is_fraction:
        return None
    pair = BACKGROUND.get(req.value)
    return declare(pair) if pair is not None else None


FAMILIES = [
    UtilityFamily("background", ("bg",), resolve_background, priority=10),
]
