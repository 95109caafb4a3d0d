"""CLI command: zephyr check -- report diagnostics for a set of classes."""

from __future__ import annotations

import sys

import click

from zephyr.cli.common import build_engine, collect_classes, input_option, theme_option
from zephyr.model.diagnostic import Severity


@click.command()
@click.argument("classes", nargs=-1)
@input_option
@theme_option
@click.option("--strict", is_flag=True, help="Exit 1 on warnings as well as errors.")
def check(
    classes: tuple[str, ...],
    input_file: str | None,
    theme_file: str | None,
    strict: bool,
) -> None:
    """Check CLASSES (and/or --input) without writing CSS.

    Prints diagnostics and exits with code 0 if no errors are found, or
    code 1 if there are errors (or warnings with --strict).
    """
    engine = build_engine(theme_file)
    found = collect_classes(classes, input_file)
    stylesheet = engine.generate(found)
    diagnostics = stylesheet.diagnostics

    if not diagnostics:
        click.echo(f"OK: {len(found)} class(es), {len(stylesheet.rules)} rule(s), 0 diagnostics")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(f"Summary: {len(errors)} error(s), {len(warnings)} warning(s)")

    if errors or (strict and warnings):
        sys.exit(1)
    sys.exit(0)
