"""Filtered list CLI commands.

A filtered list is created from a filter in its persisted JSON form, e.g.::

    todolists filtered add Urgent --filter '{"operator": "AND", "children": [
        {"field": "done", "op": "==", "value": "false"},
        {"field": "overdue", "op": "==", "value": "true"}]}'

or from a named preset (``--preset soon``).
"""

import json
from pathlib import Path
from typing import Optional

import typer

from todolists.application import soon_filter
from todolists.domain.filter import decode, encode
from todolists.interfaces.cli.common import (
    open_repository,
    print_error,
    print_header,
    print_success,
    print_tasks,
    unwrap_or_exit,
)

app = typer.Typer(help="Filtered list commands")

PRESETS = {
    "soon": soon_filter,
}


def _parse_filter(raw: str | None, preset: str | None):
    if (raw is None) == (preset is None):
        print_error("Give exactly one of --filter or --preset")
        raise typer.Exit(1)

    if preset is not None:
        if preset not in PRESETS:
            print_error(f"Unknown preset '{preset}'. Available: {', '.join(sorted(PRESETS))}")
            raise typer.Exit(1)
        return PRESETS[preset]()

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON in --filter: {e}")
        raise typer.Exit(1) from e
    return unwrap_or_exit(decode(data))


@app.command("add")
def add(
    name: str = typer.Argument(..., help="Filtered list name"),
    filter_json: Optional[str] = typer.Option(
        None, "--filter", "-f", help="Filter in its persisted JSON form"
    ),
    preset: Optional[str] = typer.Option(None, "--preset", help="Named filter (soon)"),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Create a filtered list."""
    node = _parse_filter(filter_json, preset)
    repo = open_repository(data)
    unwrap_or_exit(repo.add_filtered_list(name, node))
    print_success(f"Added filtered list '{name}'")


@app.command("show")
def show(
    name: str = typer.Argument(..., help="Filtered list name"),
    definition: bool = typer.Option(
        False, "--definition", help="Print the filter instead of the matching tasks"
    ),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Show the tasks currently matching a filtered list."""
    repo = open_repository(data)
    if definition:
        filtered = unwrap_or_exit(repo.get_filtered_list(name))
        typer.echo(json.dumps(encode(filtered.filter), indent=2))
        return

    tasks = unwrap_or_exit(repo.resolve_filtered_list(name))
    print_header(f"{name} (filtered)")
    print_tasks(tasks)


@app.command("delete")
def delete(
    name: str = typer.Argument(..., help="Filtered list name"),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Delete a filtered list definition."""
    repo = open_repository(data)
    unwrap_or_exit(repo.delete_filtered_list(name))
    print_success(f"Deleted filtered list '{name}'")
