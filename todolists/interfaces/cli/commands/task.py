"""Task management CLI commands.

Commands for the task lifecycle: adding, completing, moving, showing and
deleting tasks. Tasks are addressed by their repository-wide ID.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

import typer

from todolists.domain.task import PRIORITY_NORMAL, TaskAdd
from todolists.interfaces.cli.common import (
    DATETIME_FORMATS,
    format_due,
    open_repository,
    print_success,
    unwrap_or_exit,
)

app = typer.Typer(help="Task management commands")


@app.command("add")
def add(
    list_name: str = typer.Argument(..., metavar="LIST", help="List to add the task to"),
    title: str = typer.Argument(..., help="Task title"),
    all_day: bool = typer.Option(False, "--all-day", help="Due date has no time of day"),
    priority: int = typer.Option(
        PRIORITY_NORMAL, "--priority", "-p", min=-2, max=2, help="Priority from -2 to 2"
    ),
    due_on: Optional[datetime] = typer.Option(
        None, "--due-on", formats=DATETIME_FORMATS, help="Task happens on this date"
    ),
    due_by: Optional[datetime] = typer.Option(
        None, "--due-by", formats=DATETIME_FORMATS, help="Task must be done by this date"
    ),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Add a task to the end of a list."""
    repo = open_repository(data)
    request = TaskAdd(title=title, all_day=all_day, priority=priority, due_on=due_on, due_by=due_by)
    task = unwrap_or_exit(repo.add_task(list_name, request))
    print_success(f"Added task #{task.id} to '{list_name}'")


@app.command("done")
def done(
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
    undo: bool = typer.Option(False, "--undo", help="Mark the task as pending again"),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Mark a task as done."""
    repo = open_repository(data)
    task = unwrap_or_exit(repo.mark_done(task_id, not undo))
    state = "done" if task.done else "pending"
    print_success(f"Marked #{task.id} '{task.title}' as {state}")


@app.command("move")
def move(
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
    list_name: str = typer.Argument(..., metavar="LIST", help="Destination list"),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Move a task to the end of another list."""
    repo = open_repository(data)
    task = unwrap_or_exit(repo.move_task(task_id, list_name))
    print_success(f"Moved #{task.id} to '{task.list}'")


@app.command("delete")
def delete(
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Delete a task."""
    repo = open_repository(data)
    unwrap_or_exit(repo.delete_task(task_id))
    print_success(f"Deleted task #{task_id}")


@app.command("show")
def show(
    task_id: int = typer.Argument(..., metavar="ID", help="Task ID"),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Show the details of a task."""
    repo = open_repository(data)
    task = unwrap_or_exit(repo.get_task(task_id))

    typer.echo(f"#{task.id} {task.title}")
    typer.echo(f"  list:     {task.list}")
    typer.echo(f"  priority: {task.priority}")
    typer.echo(f"  created:  {task.created:%Y-%m-%d %H:%M}")
    if task.due is not None:
        typer.echo(f"  {format_due(task)}{' (all day)' if task.all_day else ''}")
    if task.done_on is not None:
        typer.echo(f"  done on:  {task.done_on:%Y-%m-%d %H:%M}")
    elif task.is_overdue():
        typer.echo("  overdue")
