"""Utility families: the resolver contract and shared value helpers.

A family is a pure function plus a static declaration of the prefixes it
owns.  The function receives a :class:`UtilityRequest` describing the
matched prefix and the remainder of the class, and returns a
:class:`~zephyr.model.resolution.UtilityResolution` or ``None`` when the
class is not one it understands.  Returning ``None`` lets the registry fall
through to the next candidate; a family must never return an empty result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Mapping

from zephyr.model.resolution import Declaration, UtilityResolution
from zephyr.model.token import NO_VALUE, ValueSpec
from zephyr.theme.model import Theme
from zephyr.values.arbitrary import looks_like_color, normalize_arbitrary
from zephyr.values.color import apply_opacity, resolve_color
from zephyr.values.spacing import fraction_percent, negate, resolve_spacing

_NEGATABLE_FUNCS = ("calc(", "var(", "min(", "max(", "clamp(")


@dataclass(frozen=True)
class UtilityRequest:
    """What a family is asked to resolve.

    ``prefix`` is the trie match (``"bg"``), ``value`` the remainder of the
    dispatch key after ``prefix-`` (``"blue-500"``; empty for bare classes
    and bracketed values), ``spec`` the parsed value.
    """

    theme: Theme
    prefix: str
    value: str = ""
    spec: ValueSpec = NO_VALUE
    negative: bool = False
    opacity: int | None = None

    @property
    def arbitrary(self) -> str | None:
        """The normalized bracketed value, when the class has one."""
        if self.spec.is_arbitrary and not self.value:
            return normalize_arbitrary(self.spec.text)
        return None

    @property
    def fraction(self) -> str | None:
        if self.spec.is_fraction and not self.value:
            return fraction_percent(self.spec.numerator, self.spec.denominator)
        return None

    @property
    def is_bare(self) -> bool:
        """True for classes that are exactly the prefix (``flex``, ``border``)."""
        return not self.value and not self.spec.is_arbitrary and not self.spec.is_fraction


ResolveFunc = Callable[[UtilityRequest], "UtilityResolution | None"]


@dataclass(frozen=True)
class UtilityFamily:
    """A resolver plus its static dispatch declaration.

    Higher ``priority`` wins when two families claim the same prefix.
    ``negative`` and ``opacity`` say whether the family understands a
    leading ``-`` or a ``/NN`` modifier; the registry skips it otherwise.
    """

    name: str
    prefixes: tuple[str, ...]
    resolve: ResolveFunc
    priority: int = 0
    negative: bool = False
    opacity: bool = False


# ---------------------------------------------------------------------------
# Building resolutions
# ---------------------------------------------------------------------------


def declare(*pairs: tuple[str, str]) -> UtilityResolution:
    """``declare(("display", "flex"))`` -> a resolution with one declaration."""
    return UtilityResolution(properties=tuple(Declaration(n, v) for n, v in pairs))


def declare_all(names: Iterable[str], value: str) -> UtilityResolution:
    """The same value for several properties (``px-4`` -> left and right)."""
    return declare(*((name, value) for name in names))


def keyword_family(
    name: str,
    table: Mapping[str, tuple[tuple[str, str], ...]],
    priority: int = 0,
) -> UtilityFamily:
    """A family of fixed classes, one prefix per class name."""

    def resolve(req: UtilityRequest) -> UtilityResolution | None:
        pairs = table.get(req.prefix)
        if pairs is None or not req.is_bare:
            return None
        return declare(*pairs)

    return UtilityFamily(name=name, prefixes=tuple(table), resolve=resolve, priority=priority)


# ---------------------------------------------------------------------------
# Value helpers
# ---------------------------------------------------------------------------


def _negatable(value: str) -> bool:
    return value[:1].isdigit() or value[:1] == "." or value.startswith(_NEGATABLE_FUNCS)


def length(
    req: UtilityRequest,
    *,
    keywords: Mapping[str, str] | None = None,
    spacing: bool = True,
    fractions: bool = True,
) -> str | None:
    """Resolve a length from the spacing scale, keywords, fractions or brackets.

    Negative requests only succeed for numeric values (``-m-4``, not
    ``-m-auto``).
    """
    value = req.arbitrary
    if value is None and fractions:
        value = req.fraction
    if value is None:
        if req.spec.is_arbitrary or req.spec.is_fraction or not req.value:
            return None
        if keywords and req.value in keywords:
            value = keywords[req.value]
        elif spacing:
            value = resolve_spacing(req.theme, req.value)
    if value is None:
        return None
    if req.negative:
        if not _negatable(value):
            return None
        value = negate(value)
    return value


def lookup(req: UtilityRequest, table: Mapping[str, str], *, arbitrary: bool = True) -> str | None:
    """Resolve ``req.value`` in *table*, or pass a bracketed value through."""
    if req.arbitrary is not None:
        return req.arbitrary if arbitrary else None
    if req.spec.is_arbitrary or req.spec.is_fraction:
        return None
    return table.get(req.value)


def color(req: UtilityRequest) -> str | None:
    """Resolve a palette or bracketed color and apply any opacity modifier."""
    value = req.arbitrary
    if value is not None:
        if not looks_like_color(value):
            return None
    elif req.spec.is_arbitrary or req.spec.is_fraction or not req.value:
        return None
    else:
        value = resolve_color(req.theme, req.value)
        if value is None:
            return None
    return apply_opacity(value, req.opacity)


def integer(req: UtilityRequest, low: int, high: int) -> str | None:
    """A plain integer within ``[low, high]`` or a bracketed value."""
    if req.arbitrary is not None:
        return req.arbitrary
    if not req.value.isdigit():
        return None
    number = int(req.value)
    if not low <= number <= high:
        return None
    return f"-{number}" if req.negative and number else str(number)
