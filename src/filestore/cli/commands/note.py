from __future__ import annotations

from typing import Annotated

import typer
from pydantic import ValidationError
from result import is_err

from filestore.location import BaseDirectory, LocationDescriptor
from filestore.serialization import FileableModel
from filestore.store import FileStoreError, get_default_store

NameOption = Annotated[str, typer.Option("--name", "-n", help="File name, without extension.")]
ExtensionOption = Annotated[
    str | None, typer.Option("--ext", "-e", help="File extension, without the dot. Pass an empty string for none.")
]
SubdirOption = Annotated[
    str | None, typer.Option("--subdir", "-d", help="Directory under the base directory, created on write.")
]
BaseOption = Annotated[
    BaseDirectory,
    typer.Option("--base", "-b", case_sensitive=False, help="Base directory the file is stored under."),
]

app = typer.Typer(help="Save, read and delete a sample note stored as JSON.")


class SampleNote(FileableModel):
    text: str


@app.callback(invoke_without_command=True)
def _note_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("write")
def write(
    text: Annotated[str, typer.Argument(help="Text to save.")],
    name: NameOption = "sample",
    ext: ExtensionOption = "json",
    subdir: SubdirOption = None,
    base: BaseOption = BaseDirectory.DOCUMENTS,
) -> None:
    location = _build_location(name, ext, subdir, base)
    result = SampleNote(text=text).write_to(location)
    if is_err(result):
        _handle_error(result.unwrap_err())
        raise typer.Exit(code=1)

    typer.echo(str(result.unwrap()))


@app.command("read")
def read(
    name: NameOption = "sample",
    ext: ExtensionOption = "json",
    subdir: SubdirOption = None,
    base: BaseOption = BaseDirectory.DOCUMENTS,
) -> None:
    location = _build_location(name, ext, subdir, base)
    result = SampleNote.read_from(location)
    if is_err(result):
        _handle_error(result.unwrap_err())
        raise typer.Exit(code=1)

    typer.echo(result.unwrap().text)


@app.command("exists")
def exists(
    name: NameOption = "sample",
    ext: ExtensionOption = "json",
    subdir: SubdirOption = None,
    base: BaseOption = BaseDirectory.DOCUMENTS,
) -> None:
    location = _build_location(name, ext, subdir, base)
    typer.echo("true" if get_default_store().exists(location) else "false")


@app.command("delete")
def delete(
    name: NameOption = "sample",
    ext: ExtensionOption = "json",
    subdir: SubdirOption = None,
    base: BaseOption = BaseDirectory.DOCUMENTS,
) -> None:
    location = _build_location(name, ext, subdir, base)
    result = SampleNote.delete_file(location)
    if is_err(result):
        _handle_error(result.unwrap_err())
        raise typer.Exit(code=1)

    if result.unwrap():
        typer.echo(f"{location.file_component} has been deleted")
    else:
        typer.echo(f"Could not delete {location.file_component} because it does not exist.")


def _build_location(name: str, ext: str | None, subdir: str | None, base: BaseDirectory) -> LocationDescriptor:
    try:
        return LocationDescriptor(
            file_name=name, file_extension=ext or None, subdirectory_name=subdir, base_directory=base
        )
    except ValidationError as e:
        messages = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        typer.secho(f"Invalid location: {messages}", err=True, fg=typer.colors.RED)
        raise typer.Exit(code=2) from e


def _handle_error(error: FileStoreError) -> None:
    typer.secho(error.message, err=True, fg=typer.colors.RED)
