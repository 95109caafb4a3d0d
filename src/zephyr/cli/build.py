"""CLI command: zephyr build -- compile classes to CSS."""

from __future__ import annotations

import json
from pathlib import Path

import click

from zephyr.cli.common import (
    build_engine,
    collect_classes,
    dark_mode_option,
    input_option,
    theme_option,
)
from zephyr.render import render_css


@click.command()
@click.argument("classes", nargs=-1)
@input_option
@theme_option
@dark_mode_option
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write output to a file.")
@click.option("--minify", is_flag=True, help="Emit minified CSS.")
@click.option("--json", "as_json", is_flag=True, help="Emit rules and diagnostics as JSON.")
def build(
    classes: tuple[str, ...],
    input_file: str | None,
    theme_file: str | None,
    dark_mode: str,
    output: str | None,
    minify: bool,
    as_json: bool,
) -> None:
    """Compile CLASSES (and/or --input) into a stylesheet.

    Diagnostics are reported on stderr; the stylesheet still contains every
    class that could be resolved.
    """
    engine = build_engine(theme_file, dark_mode)
    stylesheet = engine.generate(collect_classes(classes, input_file))

    if as_json:
        payload = stylesheet.to_dict()
        payload["css"] = render_css(stylesheet, minify=minify)
        text = json.dumps(payload, indent=2) + "\n"
    else:
        text = render_css(stylesheet, minify=minify)
        for diag in stylesheet.diagnostics:
            click.echo(str(diag), err=True)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        click.echo(f"Wrote {len(stylesheet.rules)} rule(s) to {output}", err=True)
    else:
        click.echo(text, nl=False)
