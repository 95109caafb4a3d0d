"""Flexbox, grid and box-alignment utilities."""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import (
    UtilityFamily,
    UtilityRequest,
    declare,
    integer,
    length,
    lookup,
)

FLEX_VALUES: dict[str, tuple[str, str]] = {
    "row": ("flex-direction", "row"),
    "row-reverse": ("flex-direction", "row-reverse"),
    "col": ("flex-direction", "column"),
    "col-reverse": ("flex-direction", "column-reverse"),
    "wrap": ("flex-wrap", "wrap"),
    "wrap-reverse": ("flex-wrap", "wrap-reverse"),
    "nowrap": ("flex-wrap", "nowrap"),
    "1": ("flex", "1 1 0%"),
    "auto": ("flex", "1 1 auto"),
    "initial": ("flex", "0 1 auto"),
    "none": ("flex", "none"),
}

_ALIGN = {
    "start": "flex-start",
    "end": "flex-end",
    "center": "center",
    "between": "space-between",
    "around": "space-around",
    "evenly": "space-evenly",
    "stretch": "stretch",
    "baseline": "baseline",
    "normal": "normal",
    "auto": "auto",
}

# prefix -> (property, accepted keys)
ALIGNMENT: dict[str, tuple[str, tuple[str, ...]]] = {
    "justify": ("justify-content", ("start", "end", "center", "between", "around", "evenly", "stretch", "normal")),
    "justify-items": ("justify-items", ("start", "end", "center", "stretch", "normal")),
    "justify-self": ("justify-self", ("auto", "start", "end", "center", "stretch")),
    "items": ("align-items", ("start", "end", "center", "baseline", "stretch")),
    "content": ("align-content", ("start", "end", "center", "between", "around", "evenly", "stretch", "baseline", "normal")),
    "self": ("align-self", ("auto", "start", "end", "center", "stretch", "baseline")),
    "place-content": ("place-content", ("start", "end", "center", "between", "around", "evenly", "stretch", "baseline")),
    "place-items": ("place-items", ("start", "end", "center", "stretch", "baseline")),
    "place-self": ("place-self", ("auto", "start", "end", "center", "stretch")),
}

_PLACE_PREFIXES = ("place-content", "place-items", "place-self", "justify-items", "justify-self")

GRID_TEMPLATE = {"grid-cols": "grid-template-columns", "grid-rows": "grid-template-rows"}

GRID_LINES = {
    "col-span": "grid-column",
    "col-start": "grid-column-start",
    "col-end": "grid-column-end",
    "row-span": "grid-row",
    "row-start": "grid-row-start",
    "row-end": "grid-row-end",
}

GRID_FLOW = {
    "row": "row",
    "col": "column",
    "dense": "dense",
    "row-dense": "row dense",
    "col-dense": "column dense",
}

GRID_AUTO = {"auto-cols": "grid-auto-columns", "auto-rows": "grid-auto-rows"}

_AUTO_SIZES = {"auto": "auto", "min": "min-content", "max": "max-content", "fr": "minmax(0, 1fr)"}


def resolve_flex(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "flex":
        return None
    if req.is_bare:
        return declare(("display", "flex"))
    if req.arbitrary is not None:
        return declare(("flex", req.arbitrary))
    pair = FLEX_VALUES.get(req.value)
    return declare(pair) if pair is not None and not req.spec.is_fraction else None


def resolve_grow_shrink(req: UtilityRequest) -> UtilityResolution | None:
    prop = {"grow": "flex-grow", "shrink": "flex-shrink"}.get(req.prefix)
    if prop is None:
        return None
    if req.is_bare:
        return declare((prop, "1"))
    value = lookup(req, {"0": "0"})
    return declare((prop, value)) if value is not None else None


def resolve_basis(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "basis":
        return None
    value = length(req, keywords={"auto": "auto", "full": "100%"})
    return declare(("flex-basis", value)) if value is not None else None


def resolve_order(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix != "order":
        return None
    keywords = {"first": "-9999", "last": "9999", "none": "0"}
    if req.value in keywords and not req.negative:
        return declare(("order", keywords[req.value]))
    value = integer(req, 1, 12)
    return declare(("order", value)) if value is not None else None


def resolve_alignment(req: UtilityRequest) -> UtilityResolution | None:
    entry = ALIGNMENT.get(req.prefix)
    if entry is None:
        return None
    prop, accepted = entry
    if req.value not in accepted:
        return None
    value = _ALIGN[req.value]
    # Grid-oriented alignment keeps logical keywords.
    if req.prefix in _PLACE_PREFIXES and req.value in ("start", "end"):
        value = req.value
    return declare((prop, value))


def resolve_grid(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix == "grid":
        return declare(("display", "grid")) if req.is_bare else None
    prop = GRID_TEMPLATE.get(req.prefix)
    if prop is not None:
        if req.arbitrary is not None:
            return declare((prop, req.arbitrary))
        if req.value in ("none", "subgrid"):
            return declare((prop, req.value))
        count = integer(req, 1, 12)
        return declare((prop, f"repeat({count}, minmax(0, 1fr))")) if count else None
    if req.prefix == "grid-flow":
        flow = GRID_FLOW.get(req.value)
        return declare(("grid-auto-flow", flow)) if flow else None
    prop = GRID_AUTO.get(req.prefix)
    if prop is not None:
        value = lookup(req, _AUTO_SIZES)
        return declare((prop, value)) if value is not None else None
    return None


def resolve_grid_lines(req: UtilityRequest) -> UtilityResolution | None:
    prop = GRID_LINES.get(req.prefix)
    if prop is None:
        return None
    if req.prefix.endswith("-span"):
        if req.value == "full":
            return declare((prop, "1 / -1"))
        span = integer(req, 1, 12)
        if span is None:
            return None
        return declare((prop, span if req.arbitrary is not None else f"span {span} / span {span}"))
    if req.value == "auto":
        return declare((prop, "auto"))
    value = integer(req, 1, 13)
    return declare((prop, value)) if value is not None else None


def resolve_grid_auto_placement(req: UtilityRequest) -> UtilityResolution | None:
    prop = {"col": "grid-column", "row": "grid-row"}.get(req.prefix)
    if prop is None or req.value != "auto":
        return None
    return declare((prop, "auto"))


FAMILIES = [
    UtilityFamily("flex", ("flex",), resolve_flex),
    UtilityFamily("flex-grow-shrink", ("grow", "shrink"), resolve_grow_shrink),
    UtilityFamily("flex-basis", ("basis",), resolve_basis),
    UtilityFamily("order", ("order",), resolve_order, negative=True),
    UtilityFamily("alignment", tuple(ALIGNMENT), resolve_alignment),
    UtilityFamily(
        "grid",
        ("grid", *GRID_TEMPLATE, "grid-flow", *GRID_AUTO),
        resolve_grid,
    ),
    UtilityFamily("grid-lines", tuple(GRID_LINES), resolve_grid_lines),
    UtilityFamily("grid-placement", ("col", "row"), resolve_grid_auto_placement),
]
