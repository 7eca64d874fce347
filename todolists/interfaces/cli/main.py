"""Entry point for the todolists CLI.

Usage:
    python -m todolists.interfaces.cli.main

Or via installed entry point:
    todolists <command>
"""

from todolists.interfaces.cli import app
from todolists.logging_config import configure_logging


def main() -> None:
    """Run the todolists CLI application."""
    configure_logging("WARNING")
    app()


if __name__ == "__main__":
    main()
