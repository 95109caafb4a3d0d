"""Utility families and the registry that dispatches classes to them."""

from zephyr.theme.model import Theme
from zephyr.utilities import (
    background,
    borders,
    color,
    effects,
    filters,
    flexbox,
    gradient,
    interactivity,
    layout,
    sizing,
    spacing,
    transforms,
    transitions,
    typography,
)
from zephyr.utilities.base import UtilityFamily, UtilityRequest, keyword_family
from zephyr.utilities.registry import PrefixTrie, UtilityRegistry

__all__ = [
    "UtilityFamily",
    "UtilityRequest",
    "keyword_family",
    "PrefixTrie",
    "UtilityRegistry",
    "BUILTIN_FAMILIES",
    "create_default_registry",
]

BUILTIN_FAMILIES: list[UtilityFamily] = [
    *spacing.FAMILIES,
    *sizing.FAMILIES,
    *layout.FAMILIES,
    *flexbox.FAMILIES,
    *typography.FAMILIES,
    *borders.FAMILIES,
    *color.FAMILIES,
    *effects.FAMILIES,
    *filters.FAMILIES,
    *transforms.FAMILIES,
    *gradient.FAMILIES,
    *background.FAMILIES,
    *transitions.FAMILIES,
    *interactivity.FAMILIES,
]


def create_default_registry(theme: Theme | None = None) -> UtilityRegistry:
    """Create a UtilityRegistry with every built-in family registered.

    Raises:
        RegistryError: if two built-in families claim one prefix at one
            priority (checked on every construction).
    """
    from zephyr.theme.model import default_theme

    return UtilityRegistry(theme or default_theme(), BUILTIN_FAMILIES)
