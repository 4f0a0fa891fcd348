from __future__ import annotations

import os
from typing import Annotated

import typer

from filestore.common import create_logger, setup_cli_logging
from filestore.location import BaseDirectory
from filestore.settings import get_settings

from .commands import note as note_commands
from .commands import paths as paths_commands

logger = create_logger("cli")

app = typer.Typer(help="filestore command-line interface.")
app.add_typer(note_commands.app, name="note")
app.add_typer(paths_commands.app, name="paths")


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
    settings = get_settings()
    if settings.logging.enabled:
        setup_cli_logging(
            app_info=settings.app,
            config=settings.logging,
            data_dir=settings.to_base_directories().lookup(BaseDirectory.DATA),
        )
        logger.debug("CLI logging initialized", config=settings.logging.model_dump())


def main() -> None:
    """Entrypoint for the filestore CLI."""
    _setup_logging()
    app()
