"""Error hierarchy for the zephyr compiler.

Only construction-time problems are raised; per-class problems travel as
:class:`~zephyr.model.diagnostic.Diagnostic` values instead.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zephyr.model.diagnostic import Diagnostic


class ZephyrError(Exception):
    """Base error for all zephyr errors."""


class ConfigurationError(ZephyrError):
    """The engine could not be built from the supplied configuration."""


class ThemeError(ConfigurationError):
    """A theme table is malformed (bad shape, empty key, bad template)."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class RegistryError(ConfigurationError):
    """A utility family declared an invalid or clashing prefix."""

    def __init__(self, message: str, *, prefix: str | None = None) -> None:
        super().__init__(message)
        self.prefix = prefix


class ClassParseError(ZephyrError):
    """Raised when a single class string cannot be tokenized at all."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        self.diagnostic = diagnostic
        super().__init__(diagnostic.message)


class GenerationError(ZephyrError):
    """Raised by :func:`zephyr.validation.raise_for_errors` on ERROR diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Generation failed with {len(messages)} error(s): " + "; ".join(messages)
        )
