"""Diagnostic model: structured per-class messages collected during generation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class DiagnosticKind(Enum):
    """What went wrong with a class."""

    UNKNOWN_VARIANT = "unknown-variant"
    UNKNOWN_CLASS = "unknown-class"
    MALFORMED_CLASS = "malformed-class"
    MALFORMED_ARBITRARY_VALUE = "malformed-arbitrary-value"
    INVALID_OPACITY_MODIFIER = "invalid-opacity-modifier"
    INCOMPLETE_GRADIENT = "incomplete-gradient"
    CONFLICTING_PROPERTY = "conflicting-property"


_DEFAULT_SEVERITY: dict[DiagnosticKind, Severity] = {
    DiagnosticKind.UNKNOWN_VARIANT: Severity.WARNING,
    DiagnosticKind.UNKNOWN_CLASS: Severity.WARNING,
    DiagnosticKind.MALFORMED_CLASS: Severity.ERROR,
    DiagnosticKind.MALFORMED_ARBITRARY_VALUE: Severity.ERROR,
    DiagnosticKind.INVALID_OPACITY_MODIFIER: Severity.WARNING,
    DiagnosticKind.INCOMPLETE_GRADIENT: Severity.WARNING,
    DiagnosticKind.CONFLICTING_PROPERTY: Severity.WARNING,
}


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about one class in a generation batch.

    Attributes:
        kind: Which check produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        token: The raw class string involved, if applicable.
        fix: Suggested remediation, if available.
    """

    kind: DiagnosticKind
    severity: Severity
    message: str
    token: str | None = None
    fix: str | None = None

    @classmethod
    def of(
        cls,
        kind: DiagnosticKind,
        message: str,
        token: str | None = None,
        fix: str | None = None,
    ) -> Diagnostic:
        """Build a diagnostic with the default severity for *kind*."""
        return cls(
            kind=kind,
            severity=_DEFAULT_SEVERITY[kind],
            message=message,
            token=token,
            fix=fix,
        )

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def sort_key(self) -> tuple[str, str, str]:
        return (self.token or "", self.kind.value, self.message)

    def to_dict(self) -> dict[str, str | None]:
        return {
            "kind": self.kind.value,
            "severity": self.severity.value,
            "message": self.message,
            "token": self.token,
            "fix": self.fix,
        }

    def __str__(self) -> str:
        location = f" [class={self.token}]" if self.token else ""
        return f"{self.severity.value}{location}: {self.message}"
