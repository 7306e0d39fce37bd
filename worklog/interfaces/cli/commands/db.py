"""Database export / import commands."""

from pathlib import Path

import typer

from worklog.infrastructure.storage import export_database, import_database
from worklog.interfaces.cli.common import (
    YesOption,
    confirm,
    get_context,
    load_store,
    print_info,
    print_success,
    print_warning,
    save_store,
    unwrap,
)

app = typer.Typer(help="Database export and import")


@app.command("path")
def path(ctx: typer.Context) -> None:
    """Show where the database lives."""
    cli = get_context(ctx)
    typer.echo(f"Data directory: {cli.data_dir}")
    typer.echo(f"Database:       {cli.database_path}")
    typer.echo(f"Import backup:  {cli.backup_path}")


@app.command("export")
def export(
    ctx: typer.Context,
    destination: Path = typer.Argument(..., help="File to write the copy to (overwritten)"),
) -> None:
    """Copy the whole database to a file."""
    # Write the current state first so the copy matches what is loaded
    save_store(ctx, load_store(ctx))
    written = unwrap(export_database(get_context(ctx).database_path, destination))
    print_success(f"Exported database to {written}")


@app.command("import")
def import_(
    ctx: typer.Context,
    source: Path = typer.Argument(..., help="Database file to import"),
    yes: YesOption = False,
) -> None:
    """Replace the whole database with a file.

    The current database is kept as worklog_old.json in the data
    directory, replacing any earlier backup.
    """
    cli = get_context(ctx)
    if not confirm(f"Replace all data in {cli.database_path} with {source}?", yes):
        print_info("Cancelled")
        return

    outcome = unwrap(import_database(source, cli.database_path, cli.backup_path))
    print_success(f"Imported {outcome.tickets} tickets and {outcome.entries} time entries")
    if outcome.backup_path is not None:
        typer.echo(f"  Previous data saved to {outcome.backup_path}")
    print_warning("Restart any open Worklog session to see the imported data")
