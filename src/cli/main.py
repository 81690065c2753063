"""taskledger maintenance CLI.

Commands work on the task collection document as a whole: validate it,
copy it out, or replace it with a validated file. Editing individual tasks
is the job of the application, not of this tool.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from adapters.collection_store import JsonTaskCollectionStore
from adapters.json_codec import JsonDocumentCodec
from cli.ui_components import build_tasks_table
from core.config import AppSettings
from core.domain.errors import DataConstraintError, DocumentFormatError
from core.domain.models import TaskCollection
from core.logging_setup import configure_logging

app = typer.Typer(no_args_is_help=True, help="Check, export and import the taskledger data file.")

_console = Console()
_err_console = Console(stderr=True)


class ExitCode(IntEnum):
    OK = 0
    FORMAT_ERROR = 1
    CONSTRAINT_ERROR = 2
    IO_ERROR = 3


def build_store(settings: AppSettings) -> JsonTaskCollectionStore:
    return JsonTaskCollectionStore(
        settings.data_file_path,
        codec=JsonDocumentCodec(indent=settings.json_indent),
    )


def _fail(message: str, code: ExitCode) -> typer.Exit:
    _err_console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(code=int(code))


def _load(store: JsonTaskCollectionStore, path: Path) -> Optional[TaskCollection]:
    try:
        return store.load(path)
    except DocumentFormatError as exc:
        raise _fail(str(exc), ExitCode.FORMAT_ERROR) from exc
    except DataConstraintError as exc:
        raise _fail(str(exc), ExitCode.CONSTRAINT_ERROR) from exc
    except OSError as exc:
        raise _fail(f"Cannot read {path}: {exc}", ExitCode.IO_ERROR) from exc


def _save(store: JsonTaskCollectionStore, collection: TaskCollection, path: Path) -> None:
    try:
        store.save(collection, path)
    except OSError as exc:
        raise _fail(f"Cannot write {path}: {exc}", ExitCode.IO_ERROR) from exc


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Override TASKLEDGER_LOG_LEVEL (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    """Load settings and logging once for every command."""

    settings = AppSettings()
    configure_logging((log_level or settings.log_level).upper())
    ctx.obj = build_store(settings)


@app.command()
def check(
    ctx: typer.Context,
    path: Optional[Path] = typer.Argument(None, help="File to check (default: configured data file)."),
) -> None:
    """Validate a task collection file and list its tasks."""

    store: JsonTaskCollectionStore = ctx.obj
    target = path or store.file_path

    collection = _load(store, target)
    if collection is None:
        _console.print(f"[yellow]No task collection at[/yellow] {escape(str(target))}")
        return

    _console.print(build_tasks_table(collection, title=str(target)))
    _console.print(f"[green]OK[/green] {len(collection)} task(s)")


@app.command()
def export(
    ctx: typer.Context,
    destination: Path = typer.Argument(..., help="File to write the collection to."),
    source: Optional[Path] = typer.Option(None, "--source", help="Read from this file instead."),
) -> None:
    """Copy the (validated) collection to another file."""

    store: JsonTaskCollectionStore = ctx.obj
    origin = source or store.file_path

    collection = _load(store, origin)
    if collection is None:
        raise _fail(f"Nothing to export: {origin} does not exist", ExitCode.IO_ERROR)

    _save(store, collection, destination)
    _console.print(f"[green]Exported[/green] {len(collection)} task(s) to {escape(str(destination))}")


@app.command(name="import")
def import_(
    ctx: typer.Context,
    source: Path = typer.Argument(..., help="File to import."),
) -> None:
    """Replace the configured data file with a validated copy of SOURCE."""

    store: JsonTaskCollectionStore = ctx.obj

    collection = _load(store, source)
    if collection is None:
        raise _fail(f"Nothing to import: {source} does not exist", ExitCode.IO_ERROR)

    _save(store, collection, store.file_path)
    _console.print(
        f"[green]Imported[/green] {len(collection)} task(s) into {escape(str(store.file_path))}"
    )


def run() -> None:
    app()
