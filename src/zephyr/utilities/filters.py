"""Filter and backdrop-filter utilities.

Each filter function writes its own custom property, and every filter class
sets ``filter`` to one chain reading all of them, so ``blur`` and
``grayscale`` on the same element compose.  Backdrop filters do the same
under ``--backdrop-*`` names.
"""

from __future__ import annotations

from zephyr.model.resolution import UtilityResolution
from zephyr.utilities.base import UtilityFamily, UtilityRequest, declare
from zephyr.values.color import format_alpha

FILTERS = (
    "blur",
    "brightness",
    "contrast",
    "grayscale",
    "hue-rotate",
    "invert",
    "saturate",
    "sepia",
    "drop-shadow",
)

BACKDROP_FILTERS = (
    "blur",
    "brightness",
    "contrast",
    "grayscale",
    "hue-rotate",
    "invert",
    "opacity",
    "saturate",
    "sepia",
)

FILTER_CHAIN = " ".join(f"var(--{name},)" for name in FILTERS)
BACKDROP_CHAIN = " ".join(f"var(--backdrop-{name},)" for name in BACKDROP_FILTERS)

BRIGHTNESS = ("0", "50", "75", "90", "95", "100", "105", "110", "125", "150", "200")
CONTRAST = ("0", "50", "75", "100", "125", "150", "200")
SATURATE = ("0", "50", "100", "150", "200")
HUE_ROTATE = ("0", "15", "30", "60", "90", "180")

_PERCENT_STEPS = {"brightness": BRIGHTNESS, "contrast": CONTRAST, "saturate": SATURATE}

# Bare class applies the full effect, ``-0`` turns it off.
_TOGGLES = {"": "100%", "0": "0%"}


def _call(req: UtilityRequest, name: str) -> str | None:
    """The CSS filter function for one class, e.g. ``blur(8px)``."""
    if req.negative and name != "hue-rotate":
        return None
    if req.arbitrary is not None:
        arg = f"calc({req.arbitrary} * -1)" if req.negative else req.arbitrary
        return f"{name}({arg})"
    if req.spec.is_arbitrary or req.spec.is_fraction:
        return None
    if name == "blur":
        value = req.theme.blur.get(req.value)
        return f"blur({value})" if value is not None else None
    if name == "drop-shadow":
        return req.theme.drop_shadow.get(req.value)
    if name in ("grayscale", "invert", "sepia"):
        value = _TOGGLES.get(req.value)
        return f"{name}({value})" if value is not None else None
    if name == "hue-rotate":
        if req.value not in HUE_ROTATE:
            return None
        sign = "-" if req.negative and req.value != "0" else ""
        return f"hue-rotate({sign}{req.value}deg)"
    if name == "opacity":
        if req.value not in req.theme.opacity_steps:
            return None
        return f"opacity({format_alpha(int(req.value))})"
    if req.value not in _PERCENT_STEPS[name]:
        return None
    return f"{name}({req.value}%)"


def resolve_filter(req: UtilityRequest) -> UtilityResolution | None:
    if req.prefix == "filter" and not req.negative:
        if req.is_bare:
            return declare(("filter", FILTER_CHAIN))
        return declare(("filter", "none")) if req.value == "none" else None
    if req.prefix not in FILTERS:
        return None
    call = _call(req, req.prefix)
    if call is None:
        return None
    return declare((f"--{req.prefix}", call), ("filter", FILTER_CHAIN))


def _backdrop(value: str) -> UtilityResolution:
    return declare(("-webkit-backdrop-filter", value), ("backdrop-filter", value))


def resolve_backdrop(req: UtilityRequest) -> UtilityResolution | None:
    """``backdrop-<filter>`` classes, plus ``backdrop-filter`` and ``backdrop-filter-none``."""
    if req.prefix == "backdrop-filter" and not req.negative:
        if req.is_bare:
            return _backdrop(BACKDROP_CHAIN)
        return _backdrop("none") if req.value == "none" else None
    name = req.prefix[len("backdrop-"):]
    if not req.prefix.startswith("backdrop-") or name not in BACKDROP_FILTERS:
        return None
    call = _call(req, name)
    if call is None:
        return None
    return declare(
        (f"--{req.prefix}", call),
        ("-webkit-backdrop-filter", BACKDROP_CHAIN),
        ("backdrop-filter", BACKDROP_CHAIN),
    )


FAMILIES = [
    UtilityFamily("filter", ("filter", *FILTERS), resolve_filter, negative=True),
    UtilityFamily(
        "backdrop-filter",
        ("backdrop-filter", *(f"backdrop-{name}" for name in BACKDROP_FILTERS)),
        resolve_backdrop,
        negative=True,
    ),
]
