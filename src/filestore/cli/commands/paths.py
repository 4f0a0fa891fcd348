from __future__ import annotations

import json
from enum import Enum
from typing import Annotated

import typer
import yaml

from filestore.settings import get_settings


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]

app = typer.Typer(help="Inspect base directory locations.")


@app.callback(invoke_without_command=True)
def _paths_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("show")
def show(format: FormatOption = OutputFormat.YAML) -> None:
    directories = get_settings().to_base_directories()
    payload = {category.value: str(path) for category, path in directories.lookup_all().items()}
    typer.echo(_format_payload(payload, format))


def _format_payload(payload: dict[str, str], format: OutputFormat) -> str:
    if format is OutputFormat.JSON:
        return json.dumps(payload, indent=2, sort_keys=True)
    return yaml.safe_dump(payload, sort_keys=True)
