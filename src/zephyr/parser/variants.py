"""Known variant prefixes, built once per engine from the theme."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from zephyr.model.token import VariantKind, VariantSpec
from zephyr.theme.model import Theme

COLOR_SCHEMES = ("dark", "light")


class VariantTable:
    """Exact-match lookup from a variant prefix to its :class:`VariantSpec`."""

    def __init__(self, specs: Mapping[str, VariantSpec]) -> None:
        self._specs = MappingProxyType(dict(specs))

    @classmethod
    def from_theme(cls, theme: Theme) -> VariantTable:
        specs: dict[str, VariantSpec] = {}
        for name in theme.breakpoints:
            specs[name] = VariantSpec(VariantKind.RESPONSIVE, name)
        for name in COLOR_SCHEMES:
            specs[name] = VariantSpec(VariantKind.COLOR_SCHEME, name)
        for name, pseudo in theme.states.items():
            specs[name] = VariantSpec(VariantKind.STATE, name, pseudo)
        for name, template in theme.variants.items():
            specs[name] = VariantSpec(VariantKind.CUSTOM, name, template)
        return cls(specs)

    def lookup(self, name: str) -> VariantSpec | None:
        return self._specs.get(name)

    def names(self) -> list[str]:
        return sorted(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)
