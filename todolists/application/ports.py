"""Port interface for list persistence (storage boundary)."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from todolists.domain.filter import FilteredList
from todolists.domain.shared import Result
from todolists.domain.task import TaskList


@runtime_checkable
class Storage(Protocol):
    """Durable store for real lists (with their tasks) and filtered lists.

    Failures are reported as ``Err(str)``; the repository does not interpret
    their cause.
    """

    def load_lists(self) -> Result[list[TaskList], str]:
        """Return every real list in stored order."""

    def save_lists(self, lists: Sequence[TaskList]) -> Result[None, str]:
        """Insert or replace lists by name, all-or-nothing for the batch."""

    def delete_list(self, name: str) -> Result[None, str]:
        """Remove a real list and its tasks."""

    def load_filtered_lists(self) -> Result[list[FilteredList], str]:
        """Return every filtered list, fully decoded, in stored order."""

    def save_filtered_list(self, filtered: FilteredList) -> Result[None, str]:
        """Insert or replace a filtered list by name."""

    def delete_filtered_list(self, name: str) -> Result[None, str]:
        """Remove a filtered list."""
