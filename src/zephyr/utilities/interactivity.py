"""Cursor, pointer-events, user-select and resize utilities."""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, declare, keyword_family, lookup

CURSORS = {
    name: name
    for name in (
        "auto", "default", "pointer", "wait", "text", "move", "help",
        "not-allowed", "none", "progress", "crosshair", "grab", "grabbing",
        "zoom-in", "zoom-out",
    )
}

SELECT = {"none": "none", "text": "text", "all": "all", "auto": "auto"}

KEYWORDS = {
    "pointer-events-none": (("pointer-events", "none"),),
    "pointer-events-auto": (("pointer-events", "auto"),),
    "resize": (("resize", "both"),),
    "resize-none": (("resize", "none"),),
    "resize-x": (("resize", "horizontal"),),
    "resize-y": (("resize", "vertical"),),
    "appearance-none": (("appearance", "none"),),
    "scroll-smooth": (("scroll-behavior", "smooth"),),
    "scroll-auto": (("scroll-behavior", "auto"),),
}


def resolve_cursor(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "cursor":
        return None
    value = lookup(req, CURSORS)
    return declare(("cursor", value)) if value is not None else None


def resolve_select(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "select":
        return None
    value = lookup(req, SELECT, arbitrary=False)
    if value is None:
        return None
    return declare(("-webkit-user-select", value), ("user-select", value))


FAMILIES = [
    UtilityFamily("cursor", ("cursor",), resolve_cursor),
    UtilityFamily("user-select", ("select",), resolve_select),
    keyword_family("interactivity", KEYWORDS),
]
