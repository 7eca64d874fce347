"""Shared utilities for todolists CLI commands.

This module provides common utilities used across CLI commands:
- Opening the repository from the --data option or the global config
- Formatted output helpers (error, success, info)
- Task formatting for display
"""

from datetime import datetime
from pathlib import Path

import typer

from todolists.application import Repository
from todolists.config import get_global_config
from todolists.domain.shared import Err, Result, TodoException
from todolists.domain.task import DueKind, Task
from todolists.infrastructure.storage import FileStorage

DATETIME_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M"]

PRIORITY_LABELS = {-2: "lowest", -1: "low", 1: "high", 2: "highest"}


def open_repository(data: Path | None = None) -> Repository:
    """Open the file-backed repository.

    Args:
        data: Data file from the CLI; falls back to the configured path.

    Returns:
        Loaded Repository.

    Raises:
        typer.Exit: If the data file cannot be loaded.
    """
    path = data or get_global_config().data_path
    try:
        return Repository(FileStorage(path))
    except TodoException as e:
        print_error(e.error.message)
        raise typer.Exit(1) from e


def unwrap_or_exit(result: Result):
    """Return the Ok value, or print the error and exit with status 1."""
    if isinstance(result, Err):
        print_error(result.error.message)
        raise typer.Exit(1)
    return result.value


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message.

    Args:
        msg: Success message to display
    """
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message."""
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_separator(char: str = "=", width: int = 60) -> None:
    """Print a separator line.

    Args:
        char: Character to use for separator
        width: Width of the separator line
    """
    typer.echo(char * width)


def print_header(title: str, width: int = 60) -> None:
    """Print a formatted header with separators."""
    print_separator("=", width)
    typer.echo(title)
    print_separator("=", width)


def format_due(task: Task) -> str:
    """Describe a task's due date, e.g. ``due by 2026-10-21``."""
    if task.due is None:
        return ""
    label = "due on" if task.due_kind == DueKind.DUE_ON else "due by"
    stamp = task.due.strftime("%Y-%m-%d") if task.all_day else task.due.strftime("%Y-%m-%d %H:%M")
    return f"{label} {stamp}"


def format_task(task: Task, now: datetime | None = None) -> str:
    """Format a task as a single display line.

    Example:
        [ ] #3 Buy avocados (due by 2026-10-21) [high]
    """
    parts = [f"[{'x' if task.done else ' '}] #{task.id} {task.title}"]
    due = format_due(task)
    if due:
        parts.append(f"({due})")
    if task.priority in PRIORITY_LABELS:
        parts.append(f"[{PRIORITY_LABELS[task.priority]}]")
    if task.is_overdue(now):
        parts.append("OVERDUE")
    return " ".join(parts)


def print_tasks(tasks: list[Task], now: datetime | None = None) -> None:
    """Print tasks one per line, or a placeholder when there are none."""
    if not tasks:
        typer.echo("  (no tasks)")
        return
    for task in tasks:
        typer.echo(f"  {format_task(task, now)}")


__all__ = [
    "DATETIME_FORMATS",
    "open_repository",
    "unwrap_or_exit",
    "print_error",
    "print_success",
    "print_info",
    "print_separator",
    "print_header",
    "format_due",
    "format_task",
    "print_tasks",
]
