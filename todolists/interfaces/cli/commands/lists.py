"""List management CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from todolists.domain.types import Colour
from todolists.interfaces.cli.common import (
    open_repository,
    print_error,
    print_header,
    print_success,
    print_tasks,
    unwrap_or_exit,
)

app = typer.Typer(help="List management commands")


@app.command("add")
def add(
    name: str = typer.Argument(..., help="List name"),
    colour: Optional[str] = typer.Option(
        None, "--colour", "-c", help="Display colour as #rrggbb"
    ),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Create an empty list."""
    parsed = Colour()
    if colour:
        try:
            parsed = Colour.from_hex(colour)
        except ValueError as e:
            print_error(str(e))
            raise typer.Exit(1) from e

    repo = open_repository(data)
    unwrap_or_exit(repo.add_list(name, parsed))
    print_success(f"Added list '{name}'")


@app.command("show")
def show(
    name: str = typer.Argument(..., help="List name"),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Show a list and its tasks."""
    repo = open_repository(data)
    task_list = unwrap_or_exit(repo.get_list(name))
    print_header(f"{task_list.name} {task_list.colour}")
    print_tasks(task_list.items)


@app.command("delete")
def delete(
    name: str = typer.Argument(..., help="List name"),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Delete a list and all of its tasks."""
    repo = open_repository(data)
    unwrap_or_exit(repo.delete_list(name))
    print_success(f"Deleted list '{name}'")


def show_all(data: Path | None = None) -> None:
    """Print every real list, then every filtered list."""
    repo = open_repository(data)
    lists, filtered = unwrap_or_exit(repo.list_names())
    if not lists and not filtered:
        typer.echo("No lists yet. Create one with: todolists list add <name>")
        return
    for name in lists:
        typer.echo(f"- {name}")
    for name in filtered:
        typer.echo(f"- {name} (filtered)")
