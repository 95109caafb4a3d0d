"""Options and helpers shared by the CLI commands."""

from __future__ import annotations

from pathlib import Path

import click

from zephyr.config import DARK_MODES, ZephyrConfig
from zephyr.engine import Engine
from zephyr.errors import ConfigurationError
from zephyr.scanner import extract_classes
from zephyr.theme import load_theme

input_option = click.option(
    "--input",
    "-i",
    "input_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Read whitespace-separated classes from a file.",
)
theme_option = click.option(
    "--theme",
    "-t",
    "theme_file",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON theme overrides.",
)
dark_mode_option = click.option(
    "--dark-mode",
    type=click.Choice(DARK_MODES),
    default="class",
    show_default=True,
    help="Scope dark: variants by ancestor class or prefers-color-scheme.",
)


def collect_classes(classes: tuple[str, ...], input_file: str | None) -> list[str]:
    """Classes from arguments plus the optional input file, first-seen order."""
    texts = list(classes)
    if input_file:
        texts.append(Path(input_file).read_text(encoding="utf-8"))
    found = extract_classes(" ".join(texts))
    if not found:
        raise click.UsageError("No classes given; pass CLASSES or --input FILE.")
    return found


def build_engine(theme_file: str | None, dark_mode: str = "class") -> Engine:
    """Engine from CLI options; configuration problems become CLI errors."""
    try:
        theme = load_theme(theme_file) if theme_file else None
        return Engine(theme=theme, config=ZephyrConfig(dark_mode=dark_mode))
    except ConfigurationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc
