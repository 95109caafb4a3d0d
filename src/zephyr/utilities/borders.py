"""Border width/style, radius, outline and ring utilities."""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, declare, declare_all, lookup
from zephyr.utilities.effects import SHADOW_STACK

BORDER_SIDES: dict[str, tuple[str, ...]] = {
    "border": ("border-width",),
    "border-x": ("border-left-width", "border-right-width"),
    "border-y": ("border-top-width", "border-bottom-width"),
    "border-t": ("border-top-width",),
    "border-r": ("border-right-width",),
    "border-b": ("border-bottom-width",),
    "border-l": ("border-left-width",),
    "border-s": ("border-inline-start-width",),
    "border-e": ("border-inline-end-width",),
}

BORDER_STYLES = ("solid", "dashed", "dotted", "double", "hidden", "none")

RADIUS_CORNERS: dict[str, tuple[str, ...]] = {
    "rounded": ("border-radius",),
    "rounded-t": ("border-top-left-radius", "border-top-right-radius"),
    "rounded-r": ("border-top-right-radius", "border-bottom-right-radius"),
    "rounded-b": ("border-bottom-right-radius", "border-bottom-left-radius"),
    "rounded-l": ("border-top-left-radius", "border-bottom-left-radius"),
    "rounded-s": ("border-start-start-radius", "border-end-start-radius"),
    "rounded-e": ("border-start-end-radius", "border-end-end-radius"),
    "rounded-tl": ("border-top-left-radius",),
    "rounded-tr": ("border-top-right-radius",),
    "rounded-br": ("border-bottom-right-radius",),
    "rounded-bl": ("border-bottom-left-radius",),
}

OUTLINE_WIDTHS = ("0", "1", "2", "4", "8")

RING_WIDTHS = {"": "3px", "0": "0px", "1": "1px", "2": "2px", "4": "4px", "8": "8px"}

RING_DEFAULT_COLOR = "rgb(59 130 246 / 0.5)"


def resolve_border(req: UtilityRequest) -> UtilityResolution | None:
    """Widths for every side; styles on the bare ``border`` prefix only."""
    names = BORDER_SIDES.get(req.prefix)
    if names is None:
        return None
    if req.prefix == "border" and req.value in BORDER_STYLES:
        return declare(("border-style", req.value))
    if req.arbitrary is not None and not req.arbitrary[:1].isdigit():
        return None
    value = lookup(req, req.theme.border_width)
    if value is None and req.is_bare:
        value = req.theme.border_width.get("")
    return declare_all(names, value) if value is not None else None


def resolve_rounded(req: UtilityRequest) -> UtilityResolution | None:
    names = RADIUS_CORNERS.get(req.prefix)
    if names is None:
        return None
    value = req.theme.border_radius.get("") if req.is_bare else lookup(req, req.theme.border_radius)
    return declare_all(names, value) if value is not None else None


def resolve_outline(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix == "outline-offset":
        if req.value in OUTLINE_WIDTHS:
            return declare(("outline-offset", f"{req.value}px"))
        return declare(("outline-offset", req.arbitrary)) if req.arbitrary else None
    if req.prefix != "outline":
        return None
    if req.is_bare:
        return declare(("outline-style", "solid"))
    if req.value == "none":
        return declare(("outline", "2px solid transparent"), ("outline-offset", "2px"))
    if req.value in ("dashed", "dotted", "double"):
        return declare(("outline-style", req.value))
    if req.value in OUTLINE_WIDTHS:
        return declare(("outline-width", f"{req.value}px"))
    return None


def resolve_ring(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "ring":
        return None
    if req.value == "inset":
        return declare(("--ring-inset", "inset"))
    width = RING_WIDTHS.get(req.value) if not req.spec.is_arbitrary else None
    if width is None or req.spec.is_fraction:
        return None
    return declare(
        (
            "--ring-shadow",
            f"var(--ring-inset,) 0 0 0 {width} var(--ring-color, {RING_DEFAULT_COLOR})",
        ),
        ("box-shadow", SHADOW_STACK),
    )


FAMILIES = [
    UtilityFamily("border-width", tuple(BORDER_SIDES), resolve_border, priority=10),
    UtilityFamily("border-radius", tuple(RADIUS_CORNERS), resolve_rounded),
    UtilityFamily("outline", ("outline", "outline-offset"), resolve_outline, priority=10),
    UtilityFamily("ring-width", ("ring",), resolve_ring, priority=10),
]
