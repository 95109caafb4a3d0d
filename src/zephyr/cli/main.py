"""Zephyr CLI entry point: Click group with subcommands."""

import logging

import click

from zephyr import __version__


@click.group()
@click.version_option(version=__version__, prog_name="zephyr")
@click.option("-v", "--verbose", is_flag=True, help="Log generation details to stderr.")
def cli(verbose: bool) -> None:
    """Zephyr - compile utility classes into a stylesheet."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from zephyr.cli.build import build  # noqa: E402
from zephyr.cli.check import check  # noqa: E402
from zephyr.cli.serve import serve  # noqa: E402

cli.add_command(build)
cli.add_command(check)
cli.add_command(serve)
