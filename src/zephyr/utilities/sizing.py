"""Width, height and size constraint utilities."""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, declare_all, length

_COMMON = {
    "auto": "auto",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

PROPERTIES: dict[str, tuple[str, ...]] = {
    "w": ("width",),
    "h": ("height",),
    "size": ("width", "height"),
    "min-w": ("min-width",),
    "min-h": ("min-height",),
    "max-h": ("max-height",),
}

_KEYWORDS: dict[str, dict[str, str]] = {
    "w": {**_COMMON, "screen": "100vw", "svw": "100svw", "dvw": "100dvw"},
    "h": {**_COMMON, "screen": "100vh", "svh": "100svh", "dvh": "100dvh"},
    "size": dict(_COMMON),
    "min-w": {**_COMMON, "screen": "100vw"},
    "min-h": {**_COMMON, "screen": "100vh", "svh": "100svh", "dvh": "100dvh"},
    "max-h": {**_COMMON, "none": "none", "screen": "100vh"},
}


def resolve_size(req: UtilityRequest) -> UtilityResolution | None:
    names = PROPERTIES.get(req.prefix)
    if names is None:
        return None
    value = length(req, keywords=_KEYWORDS[req.prefix])
    return declare_all(names, value) if value is not None else None


def resolve_max_width(req: UtilityRequest) -> UtilityResolution | None:
    """``max-w-prose``, ``max-w-screen-md``, ``max-w-full`` and friends."""
    if req.prefix != "max-w":
        return None
    if req.value.startswith("screen-"):
        width = req.theme.breakpoints.get(req.value[len("screen-"):])
        return declare_all(("max-width",), f"{width}px") if width else None
    value = length(req, keywords={**_COMMON, **req.theme.max_width})
    return declare_all(("max-width",), value) if value is not None else None


FAMILIES = [
    UtilityFamily("sizing", tuple(PROPERTIES), resolve_size),
    UtilityFamily("max-width", ("max-w",), resolve_max_width),
]
