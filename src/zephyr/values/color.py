"""Color palette lookups and opacity application."""

from __future__ import annotations

from zephyr.theme.model import Theme


def resolve_color(theme: Theme, name: str) -> str | None:
    """``"blue-500"`` -> ``"#3b82f6"``; ``"white"`` -> ``"#ffffff"``."""
    special = theme.special_colors.get(name)
    if special is not None:
        return special
    family, sep, shade = name.rpartition("-")
    if not sep:
        return None
    shades = theme.colors.get(family)
    if shades is None:
        return None
    return shades.get(shade)


def hex_to_rgb(value: str) -> tuple[int, int, int] | None:
    """Parse ``#rgb``/``#rrggbb`` (alpha digits are dropped)."""
    if not value.startswith("#"):
        return None
    digits = value[1:]
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits[:3])
    elif len(digits) in (6, 8):
        digits = digits[:6]
    else:
        return None
    try:
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    except ValueError:
        return None


def format_alpha(opacity: int) -> str:
    """50 -> ``"0.5"``, 100 -> ``"1"``, 0 -> ``"0"``."""
    return f"{opacity / 100:.2f}".rstrip("0").rstrip(".")


def apply_opacity(color: str, opacity: int | None) -> str:
    """Apply an ``/NN`` opacity modifier to a resolved color.

    Hex colors become ``rgb(r g b / a)``; other colors are mixed with
    transparent.  Keywords without a color (``inherit``, ``transparent``)
    are returned unchanged.
    """
    if opacity is None or color in ("inherit", "transparent"):
        return color
    rgb = hex_to_rgb(color)
    if rgb is not None:
        r, g, b = rgb
        return f"rgb({r} {g} {b} / {format_alpha(opacity)})"
    return f"color-mix(in srgb, {color} {opacity}%, transparent)"
