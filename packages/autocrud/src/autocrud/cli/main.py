"""
autocrud CLI

Command-line access to the CRUD engine for any record model.

Models are given as import paths, e.g. "myapp.models:Widget".

Commands:
- migrate: Create or alter the table of a model
- create: Insert a record from a JSON payload
- get: Show one record
- list: Show a page of records
- update: Merge a partial JSON payload onto a record
- delete: Delete a record
"""

import importlib
import json
import logging
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from basecore.db import create_engine_from_url
from basecore.logging import setup_logging
from basecore.settings import get_settings
from autocrud.contracts.types import Status
from autocrud.decoding import JsonDecoder
from autocrud.engines import RegisteredType, register_type
from autocrud.errors import MigrationError
from autocrud.persistence import SQLAlchemyStore, record_fields, record_to_dict

app = typer.Typer(
    name="autocrud",
    help="Generic CRUD engine CLI",
)

console = Console()
logger = logging.getLogger("autocrud.cli")

DatabaseUrlOption = typer.Option(None, "--database-url", help="SQLAlchemy URL (defaults to DATABASE_URL)")


def load_model(path: str) -> type:
    """Import "package.module:ClassName"."""
    module_name, _, class_name = path.partition(":")
    if not module_name or not class_name:
        raise typer.BadParameter(f"expected 'package.module:ClassName', got {path!r}")
    try:
        module = importlib.import_module(module_name)
        return getattr(module, class_name)
    except (ImportError, AttributeError) as e:
        raise typer.BadParameter(f"cannot load model {path!r}: {e}") from e


def get_registered_type(model_path: str, database_url: Optional[str]) -> RegisteredType:
    """Register the model against the database (runs its migration)."""
    setup_logging()
    model = load_model(model_path)
    store = SQLAlchemyStore(create_engine_from_url(database_url or get_settings().DATABASE_URL))
    try:
        return register_type(model, store)
    except MigrationError as e:
        rprint(f"[red]Migration failed: {e}[/red]")
        raise typer.Exit(1)


def exit_on_failure(status: Status) -> None:
    if status != Status.OK:
        rprint(f"[red]Failed: {status.value}[/red]")
        raise typer.Exit(1)


def _render(value) -> str:
    return "" if value is None else str(value)


@app.command()
def migrate(
    model: str = typer.Argument(..., help="Model import path (package.module:ClassName)"),
    database_url: Optional[str] = DatabaseUrlOption,
):
    """Create the model's table, or add the columns it is missing."""
    rt = get_registered_type(model, database_url)
    rprint(f"[green]Schema of {rt.name} is up to date[/green]")


@app.command()
def create(
    model: str = typer.Argument(..., help="Model import path (package.module:ClassName)"),
    payload: str = typer.Argument(..., help='Full record as JSON, e.g. \'{"Name": "x"}\''),
    database_url: Optional[str] = DatabaseUrlOption,
):
    """Insert a new record."""
    rt = get_registered_type(model, database_url)
    exit_on_failure(rt.create(logger, JsonDecoder(payload)))
    rprint(f"[green]Created {rt.name}[/green]")


@app.command()
def get(
    model: str = typer.Argument(..., help="Model import path (package.module:ClassName)"),
    record_id: int = typer.Argument(..., min=0, help="Record ID"),
    database_url: Optional[str] = DatabaseUrlOption,
):
    """Show one record as JSON."""
    rt = get_registered_type(model, database_url)
    record, status = rt.read(logger, record_id)
    exit_on_failure(status)
    console.print_json(json.dumps(record_to_dict(record), default=str))


@app.command(name="list")
def list_records(
    model: str = typer.Argument(..., help="Model import path (package.module:ClassName)"),
    page: int = typer.Option(0, min=0, help="Page number (0 = first)"),
    limit: int = typer.Option(0, min=0, help="Page size (0 = no limit)"),
    database_url: Optional[str] = DatabaseUrlOption,
):
    """Show a page of records."""
    rt = get_registered_type(model, database_url)
    envelope, status = rt.list(logger, page, limit)
    exit_on_failure(status)

    fields = record_fields(rt.model)
    table = Table(title=rt.name)
    for field in fields:
        table.add_column(field)
    for record in envelope.data:
        table.add_row(*(_render(getattr(record, field)) for field in fields))

    console.print(table)
    rprint(f"Page: {envelope.page}  Limit: {envelope.limit}  Total: {envelope.total}")


@app.command()
def update(
    model: str = typer.Argument(..., help="Model import path (package.module:ClassName)"),
    record_id: int = typer.Argument(..., min=0, help="Record ID"),
    payload: str = typer.Argument(..., help="Partial record as JSON"),
    database_url: Optional[str] = DatabaseUrlOption,
):
    """Merge a partial payload onto a record."""
    rt = get_registered_type(model, database_url)
    exit_on_failure(rt.update(logger, record_id, JsonDecoder(payload)))
    rprint(f"[green]Updated {rt.name} {record_id}[/green]")


@app.command()
def delete(
    model: str = typer.Argument(..., help="Model import path (package.module:ClassName)"),
    record_id: int = typer.Argument(..., min=0, help="Record ID"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
    database_url: Optional[str] = DatabaseUrlOption,
):
    """Delete a record."""
    rt = get_registered_type(model, database_url)

    if not force:
        confirm = typer.confirm(f"Delete {rt.name} {record_id}?")
        if not confirm:
            rprint("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    exit_on_failure(rt.delete(logger, record_id))
    rprint(f"[green]Deleted {rt.name} {record_id}[/green]")


if __name__ == "__main__":
    app()
