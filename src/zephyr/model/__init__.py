"""Zephyr model layer -- public type re-exports."""

from zephyr.model.diagnostic import Diagnostic, DiagnosticKind, Severity
from zephyr.model.resolution import CompositionPart, Declaration, UtilityResolution
from zephyr.model.rule import Keyframes, Rule, Stylesheet
from zephyr.model.token import (
    NO_VALUE,
    ClassToken,
    ValueKind,
    ValueSpec,
    VariantKind,
    VariantSpec,
)

__all__ = [
    # token
    "ClassToken",
    "VariantKind",
    "VariantSpec",
    "ValueKind",
    "ValueSpec",
    "NO_VALUE",
    # resolution
    "Declaration",
    "CompositionPart",
    "UtilityResolution",
    # rule
    "Rule",
    "Keyframes",
    "Stylesheet",
    # diagnostic
    "Severity",
    "DiagnosticKind",
    "Diagnostic",
]
