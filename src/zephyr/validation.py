"""Turn a stylesheet's ERROR diagnostics into an exception."""

from __future__ import annotations

from zephyr.errors import GenerationError
from zephyr.model.diagnostic import Diagnostic
from zephyr.model.rule import Stylesheet


def raise_for_errors(stylesheet: Stylesheet) -> list[Diagnostic]:
    """Raise :class:`GenerationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) otherwise.
    """
    errors = stylesheet.errors
    if errors:
        raise GenerationError(errors)
    return [d for d in stylesheet.diagnostics if not d.is_error]
