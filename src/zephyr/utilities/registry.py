"""Utility registry: longest-prefix trie dispatch across utility families."""

from __future__ import annotations

import logging
from typing import Iterable

from zephyr.errors import RegistryError
from zephyr.model.resolution import UtilityResolution
from zephyr.model.token import ClassToken, ValueKind, ValueSpec
from zephyr.theme.model import Theme
from zephyr.utilities.base import UtilityFamily, UtilityRequest

logger = logging.getLogger(__name__)


class _Node:
    __slots__ = ("children", "families")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.families: list[UtilityFamily] = []


class PrefixTrie:
    """Character trie mapping prefixes to the families that claim them."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, prefix: str, family: UtilityFamily) -> None:
        node = self._root
        for ch in prefix:
            node = node.children.setdefault(ch, _Node())
        node.families.append(family)
        node.families.sort(key=lambda f: (-f.priority, f.name))

    def candidates(self, key: str) -> list[tuple[str, list[UtilityFamily]]]:
        """Every prefix of *key* ending on a ``-`` boundary, longest first.

        ``"top-4"`` matches a ``top`` prefix but not a ``to`` prefix.
        """
        matches: list[tuple[str, list[UtilityFamily]]] = []
        node = self._root
        for i, ch in enumerate(key):
            child = node.children.get(ch)
            if child is None:
                break
            node = child
            end = i + 1
            if node.families and (end == len(key) or key[end] == "-"):
                matches.append((key[:end], node.families))
        matches.reverse()
        return matches


class UtilityRegistry:
    """Holds utility families and dispatches classes to them.

    Dispatch walks the trie for every claimed prefix of the class, tries the
    longest first and, for one prefix, the highest priority first.  The first
    family that returns a resolution wins.
    """

    def __init__(self, theme: Theme, families: Iterable[UtilityFamily] = ()) -> None:
        self.theme = theme
        self._trie = PrefixTrie()
        self._families: dict[str, UtilityFamily] = {}
        self._claims: dict[tuple[str, int], str] = {}
        for family in families:
            self.register(family)

    def register(self, family: UtilityFamily) -> None:
        """Add *family*; raises :class:`RegistryError` on bad declarations."""
        if family.name in self._families:
            raise RegistryError(f"Utility family {family.name!r} registered twice")
        if not family.prefixes:
            raise RegistryError(f"Utility family {family.name!r} declares no prefixes")
        for prefix in family.prefixes:
            if not prefix or prefix != prefix.strip() or prefix.startswith("-") or prefix.endswith("-"):
                raise RegistryError(
                    f"Utility family {family.name!r} declares invalid prefix {prefix!r}",
                    prefix=prefix,
                )
            owner = self._claims.get((prefix, family.priority))
            if owner is not None:
                raise RegistryError(
                    f"Prefix {prefix!r} claimed by both {owner!r} and {family.name!r} "
                    f"at priority {family.priority}",
                    prefix=prefix,
                )
        for prefix in family.prefixes:
            self._claims[(prefix, family.priority)] = family.name
            self._trie.insert(prefix, family)
        self._families[family.name] = family
        logger.debug(
            "registered utility family %s (%d prefixes, priority %d)",
            family.name,
            len(family.prefixes),
            family.priority,
        )

    def families(self) -> list[UtilityFamily]:
        """All families in registration order."""
        return list(self._families.values())

    def get(self, name: str) -> UtilityFamily | None:
        return self._families.get(name)

    def prefixes(self) -> list[str]:
        return sorted({prefix for prefix, _ in self._claims})

    def resolve(self, token: ClassToken) -> UtilityResolution | None:
        """Resolve a parsed class (variants and ``!`` are ignored here)."""
        return self.resolve_value(
            token.base_name, token.value, negative=token.negative, opacity=token.opacity
        )

    def resolve_value(
        self,
        base_name: str,
        value: ValueSpec,
        negative: bool = False,
        opacity: int | None = None,
    ) -> UtilityResolution | None:
        key = f"{base_name}-{value.text}" if value.kind is ValueKind.SCALE else base_name
        for prefix, families in self._trie.candidates(key):
            remainder = key[len(prefix) + 1 :]
            for family in families:
                if negative and not family.negative:
                    continue
                if opacity is not None and not family.opacity:
                    continue
                request = UtilityRequest(
                    theme=self.theme,
                    prefix=prefix,
                    value=remainder,
                    spec=value,
                    negative=negative,
                    opacity=opacity,
                )
                result = family.resolve(request)
                if result is None:
                    continue
                if not isinstance(result, UtilityResolution):
                    raise TypeError(
                        f"Utility family {family.name!r} returned {type(result).__name__}; "
                        "expected UtilityResolution or None"
                    )
                return result
        logger.debug("no utility family resolved %r", key)
        return None
