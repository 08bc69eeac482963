from __future__ import annotations

import os
from typing import Annotated

import typer
from result import is_ok

from errortag.common import create_logger, setup_cli_logging
from errortag.config import load_config
from errortag.settings import settings

from .commands import config as config_commands
from .commands import render as render_commands

logger = create_logger("cli")

app = typer.Typer(help="errortag command-line interface.")
app.add_typer(config_commands.app, name="config")
app.command("render")(render_commands.render)


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _setup_logging() -> None:
    result = load_config(settings.config_files)
    if not is_ok(result):
        return

    logging_config = result.ok_value.logging
    if logging_config.enabled:
        setup_cli_logging(app_info=settings.app, config=logging_config)
        logger.debug("CLI logging initialized", config=logging_config.model_dump())


def main() -> None:
    """Entrypoint for the errortag CLI."""
    _setup_logging()
    app()
