"""Theme: the immutable lookup tables consumed by the value resolvers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Mapping

from zephyr.errors import ThemeError
from zephyr.theme import defaults

_VARIANT_NAME_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")
_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

# Tables whose keys must be non-empty because the key is spelled in a class.
_KEYED_TABLES = ("spacing", "colors", "breakpoints", "states", "variants", "keyframes")


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    return value


@dataclass(frozen=True, eq=False)
class Theme:
    """Every table a generation engine reads.

    Mappings are wrapped in :class:`types.MappingProxyType` on construction,
    so a Theme can be shared between threads and engines without copying.
    """

    spacing: Mapping[str, str] = field(default_factory=lambda: defaults.SPACING)
    colors: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: defaults.COLORS)
    special_colors: Mapping[str, str] = field(default_factory=lambda: defaults.SPECIAL_COLORS)
    breakpoints: Mapping[str, int] = field(default_factory=lambda: defaults.BREAKPOINTS)
    font_size: Mapping[str, tuple[str, str]] = field(default_factory=lambda: defaults.FONT_SIZE)
    font_weight: Mapping[str, str] = field(default_factory=lambda: defaults.FONT_WEIGHT)
    font_family: Mapping[str, str] = field(default_factory=lambda: defaults.FONT_FAMILY)
    line_height: Mapping[str, str] = field(default_factory=lambda: defaults.LINE_HEIGHT)
    letter_spacing: Mapping[str, str] = field(default_factory=lambda: defaults.LETTER_SPACING)
    border_radius: Mapping[str, str] = field(default_factory=lambda: defaults.BORDER_RADIUS)
    border_width: Mapping[str, str] = field(default_factory=lambda: defaults.BORDER_WIDTH)
    box_shadow: Mapping[str, str] = field(default_factory=lambda: defaults.BOX_SHADOW)
    max_width: Mapping[str, str] = field(default_factory=lambda: defaults.MAX_WIDTH)
    z_index: Mapping[str, str] = field(default_factory=lambda: defaults.Z_INDEX)
    duration: Mapping[str, str] = field(default_factory=lambda: defaults.DURATION)
    timing_function: Mapping[str, str] = field(default_factory=lambda: defaults.TIMING_FUNCTION)
    blur: Mapping[str, str] = field(default_factory=lambda: defaults.BLUR)
    drop_shadow: Mapping[str, str] = field(default_factory=lambda: defaults.DROP_SHADOW)
    animation: Mapping[str, str] = field(default_factory=lambda: defaults.ANIMATION)
    keyframes: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: defaults.KEYFRAMES)
    rotate: tuple[str, ...] = defaults.ROTATE
    scale: tuple[str, ...] = defaults.SCALE
    opacity_steps: tuple[str, ...] = defaults.OPACITY_STEPS
    states: Mapping[str, str] = field(default_factory=lambda: defaults.STATES)
    variants: Mapping[str, str] = field(default_factory=lambda: defaults.VARIANTS)

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _freeze(getattr(self, f.name)))
        self._validate()

    # ---- validation ---------------------------------------------------------

    def _validate(self) -> None:
        for name in _KEYED_TABLES:
            table = getattr(self, name)
            if not isinstance(table, Mapping):
                raise ThemeError(f"Theme table {name!r} must be a mapping", key=name)
            for key in table:
                if not isinstance(key, str) or not key:
                    raise ThemeError(f"Theme table {name!r} has an empty key", key=name)

        for bp, width in self.breakpoints.items():
            if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
                raise ThemeError(
                    f"Breakpoint {bp!r} must be a positive pixel width, got {width!r}",
                    key=f"breakpoints.{bp}",
                )

        for family, shades in self.colors.items():
            if not isinstance(shades, Mapping) or not shades:
                raise ThemeError(
                    f"Color family {family!r} must map shades to colors",
                    key=f"colors.{family}",
                )
            for shade, value in shades.items():
                if not isinstance(value, str) or not _HEX_RE.match(value):
                    raise ThemeError(
                        f"Color {family}-{shade} must be a hex color, got {value!r}",
                        key=f"colors.{family}.{shade}",
                    )

        for name, steps in self.keyframes.items():
            if not isinstance(steps, Mapping) or not steps:
                raise ThemeError(
                    f"Keyframes {name!r} must map steps to declarations",
                    key=f"keyframes.{name}",
                )

        for size, pair in self.font_size.items():
            if not isinstance(pair, tuple) or len(pair) != 2:
                raise ThemeError(
                    f"Font size {size!r} must be a [size, line-height] pair",
                    key=f"font_size.{size}",
                )

        reserved = set(self.breakpoints) | set(self.states) | {"dark", "light"}
        for name, template in self.variants.items():
            if not _VARIANT_NAME_RE.match(name):
                raise ThemeError(f"Invalid variant name {name!r}", key=f"variants.{name}")
            if name in reserved:
                raise ThemeError(
                    f"Custom variant {name!r} shadows a built-in variant",
                    key=f"variants.{name}",
                )
            if not isinstance(template, str) or not (
                "&" in template or template.startswith("@media")
            ):
                raise ThemeError(
                    f"Variant template for {name!r} must contain '&' or start with '@media'",
                    key=f"variants.{name}",
                )

        for name, pseudo in self.states.items():
            if not isinstance(pseudo, str) or not pseudo.startswith(":"):
                raise ThemeError(
                    f"State variant {name!r} must map to a pseudo-class",
                    key=f"states.{name}",
                )


_DEFAULT: Theme | None = None


def default_theme() -> Theme:
    """Return the shared stock theme."""
    global _DEFAULT
    if _DEFAULT is None:
        _DEFAULT = Theme()
    return _DEFAULT
