"""Color utilities: every ``<prefix>-<color>`` class.

Color sits at priority 0 on prefixes that also carry non-color meanings
(``text-lg``, ``border-2``, ``shadow-md``), so those families get first look.
"""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, color, declare_all

COLOR_PROPERTIES: dict[str, tuple[str, ...]] = {
    "bg": ("background-color",),
    "text": ("color",),
    "border": ("border-color",),
    "border-x": ("border-left-color", "border-right-color"),
    "border-y": ("border-top-color", "border-bottom-color"),
    "border-t": ("border-top-color",),
    "border-r": ("border-right-color",),
    "border-b": ("border-bottom-color",),
    "border-l": ("border-left-color",),
    "outline": ("outline-color",),
    "ring": ("--ring-color",),
    "accent": ("accent-color",),
    "caret": ("caret-color",),
    "fill": ("fill",),
    "stroke": ("stroke",),
    "decoration": ("text-decoration-color",),
    "shadow": ("--shadow-color",),
}


def resolve_color(req: UtilityRequest) -> UtilityResolution | None:
    names = COLOR_PROPERTIES.get(req.prefix)
    if names is None:
        return None
    value = color(req)
    return declare_all(names, value) if value is not None else None


FAMILIES = [
    UtilityFamily("color", tuple(COLOR_PROPERTIES), resolve_color, opacity=True),
]
