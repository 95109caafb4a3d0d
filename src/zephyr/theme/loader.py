"""Build a Theme from a JSON document of overrides.

Document shape::

    {
      "breakpoints": {"tablet": 700, "desktop": 1200},
      "extend": {
        "colors": {"brand": {"500": "#ff5500"}},
        "variants": {"hocus": "&:hover, &:focus"}
      }
    }

Top-level tables replace the stock table; tables under ``extend`` are
merged on top of it, with nested tables (color shades) merged per key.
"""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping

from zephyr.errors import ThemeError
from zephyr.theme.model import Theme, default_theme

_TABLES = {f.name for f in fields(Theme)}


def _check_table(name: str) -> None:
    if name not in _TABLES:
        raise ThemeError(f"Unknown theme table {name!r}", key=name)


def theme_from_dict(data: dict[str, Any], base: Theme | None = None) -> Theme:
    """Apply *data* on top of *base* (the stock theme by default)."""
    if not isinstance(data, dict):
        raise ThemeError("Theme document must be a JSON object")
    base = base or default_theme()
    tables: dict[str, Any] = {name: getattr(base, name) for name in _TABLES}

    for name, value in data.items():
        if name == "extend":
            continue
        _check_table(name)
        tables[name] = value

    extend = data.get("extend", {})
    if not isinstance(extend, dict):
        raise ThemeError("'extend' must be a JSON object", key="extend")
    for name, value in extend.items():
        _check_table(name)
        current = tables[name]
        if isinstance(current, tuple):
            if not isinstance(value, list):
                raise ThemeError(f"'extend.{name}' must be a list", key=name)
            tables[name] = tuple(dict.fromkeys([*current, *map(str, value)]))
            continue
        if not isinstance(value, dict):
            raise ThemeError(f"'extend.{name}' must be a JSON object", key=name)
        merged = dict(current)
        for key, entry in value.items():
            # Nested tables (color shades, keyframe steps) merge one level deep.
            if isinstance(entry, dict) and isinstance(merged.get(key), Mapping):
                merged[key] = {**merged[key], **entry}
            else:
                merged[key] = entry
        tables[name] = merged

    try:
        return Theme(**tables)
    except (TypeError, ValueError, AttributeError) as exc:
        raise ThemeError(f"Malformed theme: {exc}") from exc


def load_theme(path: str | Path) -> Theme:
    """Read a JSON theme file and build a Theme from it."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ThemeError(f"{path.name}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    return theme_from_dict(data)
