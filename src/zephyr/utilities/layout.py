"""Display, positioning, overflow and other layout utilities."""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import (
    UtilityFamily,
    UtilityRequest,
    declare,
    declare_all,
    integer,
    keyword_family,
    length,
    lookup,
)

# ``flex`` and ``grid`` are owned by their own families.
DISPLAY = {
    name: (("display", value),)
    for name, value in {
        "block": "block",
        "inline-block": "inline-block",
        "inline": "inline",
        "inline-flex": "inline-flex",
        "inline-grid": "inline-grid",
        "table": "table",
        "table-row": "table-row",
        "table-cell": "table-cell",
        "contents": "contents",
        "flow-root": "flow-root",
        "list-item": "list-item",
        "hidden": "none",
    }.items()
}

POSITION = {
    name: (("position", name),)
    for name in ("static", "fixed", "absolute", "relative", "sticky")
}

MISC = {
    "visible": (("visibility", "visible"),),
    "invisible": (("visibility", "hidden"),),
    "collapse": (("visibility", "collapse"),),
    "isolate": (("isolation", "isolate"),),
    "isolation-auto": (("isolation", "auto"),),
    "box-border": (("box-sizing", "border-box"),),
    "box-content": (("box-sizing", "content-box"),),
    "float-left": (("float", "left"),),
    "float-right": (("float", "right"),),
    "float-none": (("float", "none"),),
    "clear-left": (("clear", "left"),),
    "clear-right": (("clear", "right"),),
    "clear-both": (("clear", "both"),),
    "clear-none": (("clear", "none"),),
    "object-contain": (("object-fit", "contain"),),
    "object-cover": (("object-fit", "cover"),),
    "object-fill": (("object-fit", "fill"),),
    "object-none": (("object-fit", "none"),),
    "object-scale-down": (("object-fit", "scale-down"),),
    "container": (("width", "100%"),),
}

INSET: dict[str, tuple[str, ...]] = {
    "inset": ("inset",),
    "inset-x": ("left", "right"),
    "inset-y": ("top", "bottom"),
    "top": ("top",),
    "right": ("right",),
    "bottom": ("bottom",),
    "left": ("left",),
    "start": ("inset-inline-start",),
    "end": ("inset-inline-end",),
}

_INSET_KEYWORDS = {"auto": "auto", "full": "100%"}

OVERFLOW: dict[str, str] = {
    "overflow": "overflow",
    "overflow-x": "overflow-x",
    "overflow-y": "overflow-y",
}

_OVERFLOW_VALUES = ("auto", "hidden", "clip", "visible", "scroll")

ASPECT = {"auto": "auto", "square": "1 / 1", "video": "16 / 9"}


def resolve_inset(req: UtilityRequest) -> UtilityResolution | None:
    names = INSET.get(req.prefix)
    if names is None:
        return None
    value = length(req, keywords=_INSET_KEYWORDS)
    return declare_all(names, value) if value is not None else None


def resolve_z_index(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "z":
        return None
    if req.negative:
        value = integer(req, 0, 9999) if req.value in req.theme.z_index else None
    else:
        value = lookup(req, req.theme.z_index)
    return declare(("z-index", value)) if value is not None else None


def resolve_overflow(req: UtilityRequest) -> UtilityResolution | None:
    prop = OVERFLOW.get(req.prefix)
    if prop is None or req.value not in _OVERFLOW_VALUES:
        return None
    return declare((prop, req.value))


def resolve_aspect(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "aspect":
        return None
    value = lookup(req, ASPECT)
    return declare(("aspect-ratio", value)) if value is not None else None


FAMILIES = [
    keyword_family("display", DISPLAY),
    keyword_family("position", POSITION),
    keyword_family("layout-misc", MISC),
    UtilityFamily("inset", tuple(INSET), resolve_inset, negative=True),
    UtilityFamily("z-index", ("z",), resolve_z_index, negative=True),
    UtilityFamily("overflow", tuple(OVERFLOW), resolve_overflow),
    UtilityFamily("aspect-ratio", ("aspect",), resolve_aspect),
]
