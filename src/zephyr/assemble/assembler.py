"""Stylesheet assembler: merge, dedupe and order emitted rules."""

from __future__ import annotations

from typing import Iterable

from zephyr.model.diagnostic import Diagnostic, DiagnosticKind
from zephyr.model.resolution import Declaration
from zephyr.model.rule import Keyframes, Rule, Stylesheet


def _merge(existing: Rule, incoming: Rule, diagnostics: list[Diagnostic]) -> Rule:
    """Fold *incoming* into *existing*; later declarations win per property."""
    merged: dict[str, Declaration] = {p.name: p for p in existing.properties}
    for prop in incoming.properties:
        previous = merged.get(prop.name)
        if (
            previous is not None
            and previous != prop
            and set(incoming.sources) != set(existing.sources)
        ):
            diagnostics.append(
                Diagnostic.of(
                    DiagnosticKind.CONFLICTING_PROPERTY,
                    f"{prop.name!r} on {existing.selector!r} set to {previous.value!r} "
                    f"and {prop.value!r}; using {prop.value!r}",
                    token=", ".join(incoming.sources) or None,
                )
            )
        merged[prop.name] = prop
    sources = tuple(sorted(set(existing.sources) | set(incoming.sources)))
    return Rule(
        selector=existing.selector,
        media=existing.media,
        properties=tuple(merged.values()),
        order_key=min(existing.order_key, incoming.order_key),
        sources=sources,
    )


class StylesheetAssembler:
    """Produce the final immutable :class:`Stylesheet`.

    Output depends only on the multiset of rules and diagnostics handed in,
    never on their order.
    """

    def assemble(
        self,
        rules: Iterable[Rule],
        diagnostics: Iterable[Diagnostic] = (),
        keyframes: Iterable[Keyframes] = (),
    ) -> Stylesheet:
        found = list(diagnostics)
        merged: dict[tuple[str, str | None], Rule] = {}
        for rule in sorted(rules, key=Rule.sort_key):
            key = (rule.selector, rule.media)
            existing = merged.get(key)
            merged[key] = rule if existing is None else _merge(existing, rule, found)
        ordered = tuple(sorted(merged.values(), key=Rule.sort_key))
        unique = tuple(sorted(set(found), key=Diagnostic.sort_key))
        blocks = {k.name: k for k in keyframes}
        return Stylesheet(
            rules=ordered,
            diagnostics=unique,
            keyframes=tuple(blocks[name] for name in sorted(blocks)),
        )


def assemble(
    rules: Iterable[Rule],
    diagnostics: Iterable[Diagnostic] = (),
    keyframes: Iterable[Keyframes] = (),
) -> Stylesheet:
    return StylesheetAssembler().assemble(rules, diagnostics, keyframes)
