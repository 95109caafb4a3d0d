"""Batch-scoped composition of gradient classes.

Gradient stops and directions arrive as separate classes.  Each variant
signature gets its own :class:`GradientContext`; at the end of the batch the
context flushes either one ``background-image`` declaration or, when no
direction was given, the individual stop custom properties.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from zephyr.emit.emitter import RuleEmitter
from zephyr.model.diagnostic import Diagnostic, DiagnosticKind
from zephyr.model.resolution import CompositionPart, Declaration, UtilityResolution
from zephyr.model.rule import Rule
from zephyr.model.token import ClassToken, VariantSpec

logger = logging.getLogger(__name__)

Signature = tuple[tuple[VariantSpec, ...], bool]

STOP_ORDER = ("from", "via", "to")


@dataclass
class _Slot:
    token: ClassToken
    part: CompositionPart


@dataclass
class GradientContext:
    """Accumulated gradient state for one variant signature."""

    signature: Signature
    slots: dict[str, _Slot] = field(default_factory=dict)
    tokens: list[ClassToken] = field(default_factory=list)
    first_index: int | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def add(self, token: ClassToken, part: CompositionPart, index: int) -> None:
        if token not in self.tokens:
            self.tokens.append(token)
        if self.first_index is None or index < self.first_index:
            self.first_index = index

        current = self.slots.get(part.slot)
        if current is None or current.token == token:
            self.slots[part.slot] = _Slot(token, part)
            return
        if (current.part.value, current.part.function) == (part.value, part.function):
            return
        # Conflicting values for one slot: the last canonical spelling wins.
        loser, winner = sorted(
            (current, _Slot(token, part)), key=lambda s: s.token.canonical_name
        )
        self.slots[part.slot] = winner
        self.diagnostics.append(
            Diagnostic.of(
                DiagnosticKind.CONFLICTING_PROPERTY,
                f"Gradient {part.slot!r} set by both {loser.token.canonical_name!r} "
                f"and {winner.token.canonical_name!r}; using {winner.part.value!r}",
                token=winner.token.raw,
                fix=f"Remove {loser.token.raw!r}",
            )
        )

    @property
    def stops(self) -> list[CompositionPart]:
        return [self.slots[s].part for s in STOP_ORDER if s in self.slots]

    @property
    def direction(self) -> CompositionPart | None:
        slot = self.slots.get("direction")
        return slot.part if slot else None

    def declarations(self, important: bool) -> tuple[Declaration, ...]:
        """Merged declarations; empty when a direction has no stops."""
        stops = self.stops
        direction = self.direction
        if direction is None:
            return tuple(
                Declaration(f"--gradient-{p.slot}", p.value, important) for p in stops
            )
        if not stops:
            return ()
        args = ", ".join([direction.value, *(p.value for p in stops)])
        return (Declaration("background-image", f"{direction.function}({args})", important),)

    def flush(self, emitter: RuleEmitter, important: bool = False) -> tuple[Rule | None, list[Diagnostic]]:
        diagnostics = list(self.diagnostics)
        properties = self.declarations(important or self.signature[1])
        if not properties:
            direction_token = self.slots["direction"].token
            diagnostics.append(
                Diagnostic.of(
                    DiagnosticKind.INCOMPLETE_GRADIENT,
                    f"Gradient direction {direction_token.raw!r} has no color stops",
                    token=direction_token.raw,
                    fix="Add from-*, via-* or to-* classes with the same variants",
                )
            )
            return None, diagnostics
        rule = emitter.emit_compound(self.tokens, properties, self.first_index or 0)
        return rule, diagnostics


_CONTEXT_TYPES = {"gradient": GradientContext}


class CompositionContext:
    """Holds every open context of one generation batch.

    Contexts are keyed by composition key and variant signature, so
    ``hover:to-pink-700`` and ``to-pink-700`` never merge.
    """

    def __init__(self, emitter: RuleEmitter, important: bool = False) -> None:
        self.emitter = emitter
        self.important = important
        self._contexts: dict[tuple[str, Signature], GradientContext] = {}

    def __len__(self) -> int:
        return len(self._contexts)

    def accumulate(
        self,
        signature: Signature,
        token: ClassToken,
        resolution: UtilityResolution,
        index: int,
    ) -> None:
        part = resolution.composition
        if part is None:
            raise ValueError(f"{token.raw!r} has no composition part to accumulate")
        context_type = _CONTEXT_TYPES.get(part.key)
        if context_type is None:
            raise ValueError(f"Unknown composition key {part.key!r}")
        key = (part.key, signature)
        context = self._contexts.get(key)
        if context is None:
            context = self._contexts[key] = context_type(signature)
        context.add(token, part, index)

    def flush(self, signature: Signature, key: str = "gradient") -> tuple[Rule | None, list[Diagnostic]]:
        """Flush and close one context."""
        context = self._contexts.pop((key, signature), None)
        if context is None:
            return None, []
        return context.flush(self.emitter, self.important)

    def flush_all(self) -> tuple[list[Rule], list[Diagnostic]]:
        """Flush every context in first-seen order and close them all."""
        rules: list[Rule] = []
        diagnostics: list[Diagnostic] = []
        for key, signature in sorted(
            self._contexts, key=lambda k: (self._contexts[k].first_index or 0, k[0])
        ):
            rule, found = self.flush(signature, key)
            if rule is not None:
                rules.append(rule)
            diagnostics.extend(found)
        logger.debug("flushed %d composed rule(s)", len(rules))
        return rules, diagnostics
