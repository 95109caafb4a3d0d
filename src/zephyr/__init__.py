"""Zephyr: compile utility classes into stylesheets."""
from __future__ import annotations

from zephyr.config import ZephyrConfig
from zephyr.engine import Engine, generate
from zephyr.errors import (
    ClassParseError,
    ConfigurationError,
    GenerationError,
    RegistryError,
    ThemeError,
    ZephyrError,
)
from zephyr.model import Diagnostic, DiagnosticKind, Rule, Severity, Stylesheet
from zephyr.render import render_css
from zephyr.scanner import extract_classes
from zephyr.theme import Theme, default_theme, load_theme, theme_from_dict
from zephyr.validation import raise_for_errors

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # engine
    "Engine",
    "generate",
    "ZephyrConfig",
    # theme
    "Theme",
    "default_theme",
    "load_theme",
    "theme_from_dict",
    # output
    "Rule",
    "Stylesheet",
    "Diagnostic",
    "DiagnosticKind",
    "Severity",
    "render_css",
    "raise_for_errors",
    "extract_classes",
    # errors
    "ZephyrError",
    "ConfigurationError",
    "ThemeError",
    "RegistryError",
    "ClassParseError",
    "GenerationError",
]
