"""CLI command groups for todolists."""

from todolists.interfaces.cli.commands import filtered, lists, task

__all__ = ["filtered", "lists", "task"]
