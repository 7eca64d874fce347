"""CLI interface for todolists using Typer.

Usage:
    todolists serve --demo          # Run the HTTP API with sample data
    todolists lists                 # Show all lists
    todolists list add Home         # Create a list
    todolists task add Home "Buy avocados" --due-by 2026-10-21
    todolists filtered add Soon --preset soon

The CLI is structured as:
- app: Main Typer application
- commands/: Individual command groups (list, task, filtered)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from todolists import __version__
from todolists.application import Repository, add_demo_data
from todolists.config import get_global_config
from todolists.domain.shared import TodoException
from todolists.infrastructure.storage import MemoryStorage

# Import command groups
from todolists.interfaces.cli.commands import filtered, lists, task
from todolists.interfaces.cli.common import open_repository, print_error, print_info
from todolists.logging_config import configure_logging

logger = logging.getLogger(__name__)

# Create the main Typer application
app = typer.Typer(
    name="todolists",
    help="Task lists and saved filters over them",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"todolists version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """todolists - task lists and saved filters over them.

    Filtered lists are saved predicates (done state, due dates, list
    membership) that gather matching tasks from every real list.
    """
    pass


# =============================================================================
# Register Command Groups
# =============================================================================

app.add_typer(lists.app, name="list")
app.add_typer(task.app, name="task")
app.add_typer(filtered.app, name="filtered")


# =============================================================================
# Top-Level Commands
# =============================================================================


@app.command("lists")
def show_lists(
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
) -> None:
    """Show all real and filtered lists."""
    lists.show_all(data)


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address (default from config)"),
    port: Optional[int] = typer.Option(None, "--port", help="Port (default from config)"),
    data: Optional[Path] = typer.Option(
        None, "--data", "-d", help="Data file (or set TODOLISTS_DATA env var)", envvar="TODOLISTS_DATA"
    ),
    demo: bool = typer.Option(
        False, "--demo", help="Serve in-memory sample data instead of the data file"
    ),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    from todolists.interfaces.api import create_app

    config = get_global_config()
    configure_logging(config.log_level)

    if demo:
        repo = Repository(MemoryStorage())
        try:
            add_demo_data(repo)
        except TodoException as e:
            print_error(f"Could not create demo data: {e.error.message}")
            raise typer.Exit(1) from e
        print_info("Serving demo data (changes are not saved)")
    else:
        repo = open_repository(data)
        print_info(f"Serving {data or config.data_path}")

    bind_host = host or config.host
    bind_port = port or config.port
    logger.info(f"Starting server on {bind_host}:{bind_port}")
    uvicorn.run(create_app(repo, config), host=bind_host, port=bind_port, log_config=None)


__all__ = ["app"]
