"""Padding, margin and gap utilities."""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, declare_all, length

PADDING: dict[str, tuple[str, ...]] = {
    "p": ("padding",),
    "px": ("padding-left", "padding-right"),
    "py": ("padding-top", "padding-bottom"),
    "pt": ("padding-top",),
    "pr": ("padding-right",),
    "pb": ("padding-bottom",),
    "pl": ("padding-left",),
    "ps": ("padding-inline-start",),
    "pe": ("padding-inline-end",),
}

MARGIN: dict[str, tuple[str, ...]] = {
    "m": ("margin",),
    "mx": ("margin-left", "margin-right"),
    "my": ("margin-top", "margin-bottom"),
    "mt": ("margin-top",),
    "mr": ("margin-right",),
    "mb": ("margin-bottom",),
    "ml": ("margin-left",),
    "ms": ("margin-inline-start",),
    "me": ("margin-inline-end",),
}

GAP: dict[str, tuple[str, ...]] = {
    "gap": ("gap",),
    "gap-x": ("column-gap",),
    "gap-y": ("row-gap",),
}


def resolve_padding(req: UtilityRequest) -> UtilityResolution | None:
    names = PADDING.get(req.prefix)
    if names is None:
        return None
    value = length(req, fractions=False)
    return declare_all(names, value) if value is not None else None


def resolve_margin(req: UtilityRequest) -> UtilityResolution | None:
    names = MARGIN.get(req.prefix)
    if names is None:
        return None
    value = length(req, keywords={"auto": "auto"}, fractions=False)
    return declare_all(names, value) if value is not None else None


def resolve_gap(req: UtilityRequest) -> UtilityResolution | None:
    names = GAP.get(req.prefix)
    if names is None:
        return None
    value = length(req, fractions=False)
    return declare_all(names, value) if value is not None else None


FAMILIES = [
    UtilityFamily("padding", tuple(PADDING), resolve_padding),
    UtilityFamily("margin", tuple(MARGIN), resolve_margin, negative=True),
    UtilityFamily("gap", tuple(GAP), resolve_gap),
]
