"""Generation engine: parse -> dispatch -> compose -> emit -> assemble."""

from __future__ import annotations

import logging
from typing import Iterable

from zephyr.assemble.assembler import StylesheetAssembler
from zephyr.assemble.cache import ResolutionCache
from zephyr.compose.gradient import CompositionContext
from zephyr.config import ZephyrConfig
from zephyr.emit.emitter import RuleEmitter
from zephyr.errors import ClassParseError
from zephyr.model.diagnostic import Diagnostic, DiagnosticKind
from zephyr.model.rule import Keyframes, Rule, Stylesheet
from zephyr.model.token import ClassToken, VariantSpec
from zephyr.parser.tokenizer import ParsedClass, parse_class
from zephyr.parser.variants import VariantTable
from zephyr.theme.model import Theme, default_theme
from zephyr.utilities import create_default_registry
from zephyr.utilities.registry import UtilityRegistry


class Engine:
    """Compiles batches of utility classes into stylesheets.

    Built once from a theme and config; every table it holds is read-only
    afterwards, so one engine can serve many threads.  Each call to
    :meth:`generate` is independent: composition state never outlives it.

    Raises:
        ThemeError / RegistryError: at construction, for malformed tables
            or clashing utility prefixes.
    """

    def __init__(
        self,
        theme: Theme | None = None,
        config: ZephyrConfig | None = None,
        registry: UtilityRegistry | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.theme = theme or default_theme()
        self.config = config or ZephyrConfig()
        self.registry = registry or create_default_registry(self.theme)
        self.variants = VariantTable.from_theme(self.theme)
        self.emitter = RuleEmitter(self.theme, self.config)
        self.assembler = StylesheetAssembler()
        self.cache = ResolutionCache(self.config.cache_size, self.config.cache_shards)
        self.log = logger or logging.getLogger("zephyr")

    def parse(self, raw: str) -> ParsedClass:
        """Tokenize one class with this engine's variant table."""
        return parse_class(raw, self.variants)

    def generate(self, classes: Iterable[str]) -> Stylesheet:
        """Compile one batch of classes.

        Bad classes become diagnostics; they never abort the batch.  The
        result only depends on the set of classes, not their order.
        """
        batch = sorted(set(classes))
        diagnostics: list[Diagnostic] = []
        rules: list[Rule] = []
        keyframes: set[str] = set()
        setters: dict[tuple[tuple[VariantSpec, ...], str], dict[str, tuple[int, str]]] = {}
        composition = CompositionContext(self.emitter, important=self.config.important)

        for index, raw in enumerate(batch):
            try:
                parsed = self.parse(raw)
            except ClassParseError as exc:
                diagnostics.append(exc.diagnostic)
                continue
            diagnostics.extend(parsed.diagnostics)
            token = parsed.token

            resolution = self.cache.get_or_resolve(
                token.base, lambda token=token: self.registry.resolve(token)
            )
            if resolution is None:
                diagnostics.append(self._unknown(token))
                continue
            if token.important or self.config.important:
                resolution = resolution.with_important()

            if resolution.composition is not None:
                composition.accumulate(token.signature, token, resolution, index)
                continue
            rules.append(self.emitter.emit(token, resolution.properties, index))
            keyframes.update(resolution.keyframes)
            for prop in resolution.properties:
                key = (token.canonical_variants, prop.name)
                setters.setdefault(key, {})[prop.value] = (index, token.raw)

        composed, found = composition.flush_all()
        rules.extend(composed)
        diagnostics.extend(found)
        diagnostics.extend(self._conflicts(setters))

        stylesheet = self.assembler.assemble(
            rules, diagnostics, self._keyframes(sorted(keyframes))
        )
        self.log.info(
            "Generated %d rule(s) from %d class(es) (%d error(s), %d warning(s))",
            len(stylesheet.rules),
            len(batch),
            len(stylesheet.errors),
            len(stylesheet.warnings),
        )
        return stylesheet

    @staticmethod
    def _conflicts(
        setters: dict[tuple[tuple[VariantSpec, ...], str], dict[str, tuple[int, str]]],
    ) -> list[Diagnostic]:
        """Warn when distinct classes under the same variants set one property differently.

        The class emitted last in the batch wins, since its rule sorts last.
        """
        found = []
        for (_, name), values in setters.items():
            if len(values) < 2:
                continue
            _, winner = max(values.values())
            raws = ", ".join(sorted(raw for _, raw in values.values()))
            found.append(
                Diagnostic.of(
                    DiagnosticKind.CONFLICTING_PROPERTY,
                    f"{name!r} is set differently by {raws}; {winner!r} wins",
                    token=winner,
                )
            )
        return found

    def _keyframes(self, names: list[str]) -> list[Keyframes]:
        return [
            Keyframes(name, tuple(self.theme.keyframes[name].items()))
            for name in names
            if name in self.theme.keyframes
        ]

    @staticmethod
    def _unknown(token: ClassToken) -> Diagnostic:
        return Diagnostic.of(
            DiagnosticKind.UNKNOWN_CLASS,
            f"No utility matches {token.base!r}",
            token=token.raw,
        )


def generate(classes: Iterable[str], theme: Theme | None = None, config: ZephyrConfig | None = None) -> Stylesheet:
    """One-shot helper: build an engine and compile *classes*."""
    return Engine(theme=theme, config=config).generate(classes)
