"""Rule and Stylesheet: the compiler's output model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from zephyr.model.diagnostic import Diagnostic
from zephyr.model.resolution import Declaration


@dataclass(frozen=True)
class Rule:
    """A selector, its optional media condition and its declarations.

    ``order_key`` is ``(media_rank, variant_precedence_rank,
    first_seen_index)``; ``sources`` lists the canonical class names that
    contributed to the rule.
    """

    selector: str
    media: str | None
    properties: tuple[Declaration, ...]
    order_key: tuple[int, int, int]
    sources: tuple[str, ...] = ()

    def sort_key(self) -> tuple[tuple[int, int, int], str, str]:
        return (self.order_key, self.media or "", self.selector)

    def declaration(self, name: str) -> Declaration | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "selector": self.selector,
            "media": self.media,
            "properties": [
                {"name": p.name, "value": p.value, "important": p.important}
                for p in self.properties
            ],
        }


@dataclass(frozen=True)
class Keyframes:
    """An ``@keyframes`` block: a name and its ``(step, declarations)`` pairs."""

    name: str
    steps: tuple[tuple[str, str], ...]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "steps": dict(self.steps)}


@dataclass(frozen=True)
class Stylesheet:
    """Ordered, deduplicated rules plus every diagnostic of the batch.

    ``keyframes`` holds the animations the rules reference, sorted by name.
    """

    rules: tuple[Rule, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()
    keyframes: tuple[Keyframes, ...] = ()

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]

    def find(self, selector: str, media: str | None = None) -> Rule | None:
        for rule in self.rules:
            if rule.selector == selector and rule.media == media:
                return rule
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "rules": [r.to_dict() for r in self.rules],
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "keyframes": [k.to_dict() for k in self.keyframes],
        }
