"""Parsed representation of one utility class string."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VariantKind(Enum):
    """Variant families, valued by their canonical precedence."""

    RESPONSIVE = 0
    COLOR_SCHEME = 1
    STATE = 2
    CUSTOM = 3


@dataclass(frozen=True)
class VariantSpec:
    """One variant prefix such as ``md``, ``dark`` or ``hover``.

    ``template`` holds the pseudo-class for STATE variants (``:hover``) and
    the selector template (``.group:hover &``) or media condition
    (``@media print``) for CUSTOM variants.  RESPONSIVE and COLOR_SCHEME
    variants are expanded by the emitter from the theme and config.
    """

    kind: VariantKind
    name: str
    template: str = ""

    def sort_key(self) -> tuple[int, str]:
        return (self.kind.value, self.name)


class ValueKind(Enum):
    SCALE = "scale"
    ARBITRARY = "arbitrary"
    FRACTION = "fraction"
    NONE = "none"


@dataclass(frozen=True)
class ValueSpec:
    """The value part of a base token."""

    kind: ValueKind = ValueKind.NONE
    text: str = ""
    numerator: int = 0
    denominator: int = 0

    @classmethod
    def scale(cls, text: str) -> ValueSpec:
        return cls(kind=ValueKind.SCALE, text=text)

    @classmethod
    def arbitrary(cls, text: str) -> ValueSpec:
        return cls(kind=ValueKind.ARBITRARY, text=text)

    @classmethod
    def fraction(cls, numerator: int, denominator: int) -> ValueSpec:
        return cls(
            kind=ValueKind.FRACTION,
            text=f"{numerator}/{denominator}",
            numerator=numerator,
            denominator=denominator,
        )

    @property
    def is_arbitrary(self) -> bool:
        return self.kind is ValueKind.ARBITRARY

    @property
    def is_fraction(self) -> bool:
        return self.kind is ValueKind.FRACTION


NO_VALUE = ValueSpec()


@dataclass(frozen=True)
class ClassToken:
    """A tokenized utility class.

    Attributes:
        raw: The class string exactly as written.
        base: The final segment (after the last variant) exactly as written.
        variants: Variant prefixes in the order they were written.
        base_name: Utility family key, e.g. ``bg-blue`` or ``translate-x``.
        value: Scale key, arbitrary literal or fraction following the key.
        negative: True for a leading ``-``.
        important: True for a ``!`` modifier.
        opacity: Validated ``/NN`` opacity modifier, if any.
    """

    raw: str
    base: str
    variants: tuple[VariantSpec, ...]
    base_name: str
    value: ValueSpec = NO_VALUE
    negative: bool = False
    important: bool = False
    opacity: int | None = None

    @property
    def dispatch_key(self) -> str:
        """The string the registry trie walks, e.g. ``bg-blue-500``."""
        if self.value.kind is ValueKind.SCALE:
            return f"{self.base_name}-{self.value.text}"
        return self.base_name

    @property
    def canonical_variants(self) -> tuple[VariantSpec, ...]:
        """Variants deduplicated and sorted into canonical precedence order."""
        return tuple(sorted(set(self.variants), key=VariantSpec.sort_key))

    @property
    def signature(self) -> tuple[tuple[VariantSpec, ...], bool]:
        """Composition scope: tokens sharing it target the same element state."""
        return (self.canonical_variants, self.important)

    @property
    def canonical_name(self) -> str:
        """The class name respelled with canonical variant order."""
        prefix = "".join(f"{v.name}:" for v in self.canonical_variants)
        return prefix + self.base
