"""CLI command: zephyr serve -- run the HTTP compile service."""

from __future__ import annotations

import click

from zephyr.cli.common import build_engine, dark_mode_option, theme_option
from zephyr.config import ZephyrConfig


@click.command()
@theme_option
@dark_mode_option
@click.option("--host", default=ZephyrConfig.host, show_default=True)
@click.option("--port", default=ZephyrConfig.port, show_default=True, type=int)
@click.option("--debug", is_flag=True, help="Run Flask in debug mode.")
def serve(theme_file: str | None, dark_mode: str, host: str, port: int, debug: bool) -> None:
    """Serve POST /api/compile and GET /api/health."""
    from zephyr.web.app import create_app

    engine = build_engine(theme_file, dark_mode)
    app = create_app(engine=engine)
    app.run(host=host, port=port, debug=debug)
