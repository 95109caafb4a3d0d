"""Rule emitter: turns a resolved class into a selector, media wrapper and order key."""

from __future__ import annotations

from typing import Sequence

from zephyr.config import ZephyrConfig
from zephyr.model.resolution import Declaration
from zephyr.model.rule import Rule
from zephyr.model.token import ClassToken, VariantKind, VariantSpec
from zephyr.theme.model import Theme
from zephyr.values.breakpoints import breakpoint_rank, min_width_query

_SCHEME_QUERIES = {
    "dark": "(prefers-color-scheme: dark)",
    "light": "(prefers-color-scheme: light)",
}


def escape_class(name: str) -> str:
    """Escape a class name for use after ``.`` in a selector.

    ``md:w-1/2`` -> ``md\\:w-1\\/2``; a leading digit becomes a hex escape.
    """
    out: list[str] = []
    for i, ch in enumerate(name):
        if ch.isascii() and (ch.isalnum() or ch in "_-"):
            if i == 0 and ch.isdigit():
                out.append(f"\\{ord(ch):x} ")
            else:
                out.append(ch)
        else:
            out.append("\\" + ch)
    return "".join(out)


def class_selector(token: ClassToken) -> str:
    return "." + escape_class(token.canonical_name)


def variant_rank(variants: Sequence[VariantSpec]) -> int:
    """Bitmask of the non-responsive variant kinds present."""
    rank = 0
    for kind in {v.kind for v in variants}:
        if kind is not VariantKind.RESPONSIVE:
            rank |= 1 << (kind.value - 1)
    return rank


class RuleEmitter:
    """Build :class:`Rule` objects with canonical variant ordering.

    Variants are deduplicated and sorted ``RESPONSIVE < COLOR_SCHEME <
    STATE < CUSTOM`` regardless of how they were written, so equivalent
    spellings produce byte-identical selectors.
    """

    def __init__(self, theme: Theme, config: ZephyrConfig | None = None) -> None:
        self.theme = theme
        self.config = config or ZephyrConfig()

    def emit(
        self,
        token: ClassToken,
        properties: Sequence[Declaration],
        index: int,
    ) -> Rule:
        return self._build(
            class_selector(token),
            token.canonical_variants,
            properties,
            index,
            sources=(token.canonical_name,),
        )

    def emit_compound(
        self,
        tokens: Sequence[ClassToken],
        properties: Sequence[Declaration],
        index: int,
    ) -> Rule:
        """One rule for several classes sharing a variant signature.

        The selector compounds every contributing class (``.a.b.c``) so it
        only matches elements carrying all of them.
        """
        if not tokens:
            raise ValueError("emit_compound needs at least one token")
        names = sorted({t.canonical_name for t in tokens})
        selector = "".join("." + escape_class(name) for name in names)
        return self._build(
            selector,
            tokens[0].canonical_variants,
            properties,
            index,
            sources=tuple(names),
        )

    # ---- internals ----------------------------------------------------------

    def _build(
        self,
        selector: str,
        variants: tuple[VariantSpec, ...],
        properties: Sequence[Declaration],
        index: int,
        sources: tuple[str, ...],
    ) -> Rule:
        media_types: list[str] = []
        responsive: list[tuple[int, str]] = []
        conditions: list[str] = []
        scheme_prefix = ""
        media_rank = 0

        for variant in variants:
            if variant.kind is VariantKind.RESPONSIVE:
                rank = breakpoint_rank(self.theme, variant.name)
                query = min_width_query(self.theme, variant.name)
                if query:
                    responsive.append((rank, query))
                media_rank = max(media_rank, rank)
            elif variant.kind is VariantKind.COLOR_SCHEME:
                if self.config.dark_mode == "media":
                    conditions.append(_SCHEME_QUERIES[variant.name])
                elif variant.name == "dark":
                    scheme_prefix = self.config.dark_selector + " "
                else:
                    scheme_prefix = self.config.light_selector + " "
            elif variant.kind is VariantKind.STATE:
                selector += variant.template

        for variant in variants:
            if variant.kind is not VariantKind.CUSTOM:
                continue
            if variant.template.startswith("@media"):
                condition = variant.template[len("@media"):].strip()
                if condition.startswith("("):
                    conditions.append(condition)
                else:
                    media_types.append(condition)
            else:
                selector = variant.template.replace("&", selector)

        queries = [query for _, query in sorted(responsive)]
        media = " and ".join(media_types + queries + conditions) or None
        return Rule(
            selector=scheme_prefix + selector,
            media=media,
            properties=tuple(properties),
            order_key=(media_rank, variant_rank(variants), index),
            sources=sources,
        )
