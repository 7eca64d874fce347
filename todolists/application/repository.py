"""Repository: authoritative task/list state with a write-through cache.

The repository owns an in-memory copy of every list and filtered list and
enforces the invariants the filter engine relies on (repository-wide unique
task IDs, exclusive due kinds, tasks always referencing an existing list).

Every mutation follows the same steps:

1. copy the cached lists it touches,
2. apply the change to the copies,
3. persist the copies through the Storage port,
4. reload the cache from storage.

A failed write therefore leaves the cache exactly as it was. A failed reload
marks the cache stale, and the next call reloads before doing anything else.

All public methods run under a single re-entrant lock, so the repository can
be shared by request handlers running on a thread pool.
"""

import functools
import logging
import threading
from collections.abc import Callable
from datetime import datetime

from pydantic import ValidationError

from todolists.application.ports import Storage
from todolists.domain.filter import FilteredList, Node, filter_tasks, references_list
from todolists.domain.shared import (
    Err,
    Ok,
    Result,
    TodoError,
    TodoException,
    local_now,
)
from todolists.domain.task import (
    Task,
    TaskAdd,
    TaskChange,
    TaskList,
    find_list,
    find_owner,
    find_task,
    next_task_id,
    remove_task,
)
from todolists.domain.types import Colour

logger = logging.getLogger(__name__)


def _validation_message(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'task'}: {err['msg']}"
        for err in error.errors()
    )


def _guarded(method: Callable) -> Callable:
    """Run a repository method under the lock, reloading a stale cache first."""

    @functools.wraps(method)
    def wrapper(self: "Repository", *args, **kwargs):
        with self._lock:
            if self._stale:
                refreshed = self._refresh()
                if isinstance(refreshed, Err):
                    return refreshed
            return method(self, *args, **kwargs)

    return wrapper


class _Workspace:
    """Deep copies of the cached lists touched by one operation."""

    def __init__(self, lists: list[TaskList]) -> None:
        self._source = lists
        self._copies: dict[str, TaskList] = {}

    def get(self, name: str) -> TaskList | None:
        if name not in self._copies:
            original = find_list(self._source, name)
            if original is None:
                return None
            self._copies[name] = original.model_copy(deep=True)
        return self._copies[name]

    def touched(self) -> list[TaskList]:
        return list(self._copies.values())


class Repository:
    """Task lists, tasks and filtered lists backed by a Storage port.

    Example:
        repo = Repository(MemoryStorage())
        repo.add_list("Home")
        result = repo.add_task("Home", TaskAdd(title="Buy avocados"))
        if isinstance(result, Ok):
            print(result.value.id)
    """

    def __init__(
        self,
        storage: Storage,
        clock: Callable[[], datetime] = local_now,
    ) -> None:
        """Load the current state from storage.

        Args:
            storage: Durable store for lists and filtered lists.
            clock: Source of the current instant (creation and completion
                timestamps, default evaluation time).

        Raises:
            TodoException: If the initial load fails.
        """
        self._storage = storage
        self._clock = clock
        self._lock = threading.RLock()
        self._lists: list[TaskList] = []
        self._filtered: list[FilteredList] = []
        self._stale = True

        loaded = self._refresh()
        if isinstance(loaded, Err):
            raise TodoException.from_error(loaded.error)

    # =========================================================================
    # Cache
    # =========================================================================

    def _refresh(self) -> Result[None, TodoError]:
        lists = self._storage.load_lists()
        if isinstance(lists, Err):
            self._stale = True
            logger.error(f"Failed to load lists: {lists.error}")
            return Err(TodoError.storage(f"failed to load lists: {lists.error}"))

        filtered = self._storage.load_filtered_lists()
        if isinstance(filtered, Err):
            self._stale = True
            logger.error(f"Failed to load filtered lists: {filtered.error}")
            return Err(TodoError.storage(f"failed to load filtered lists: {filtered.error}"))

        self._lists = lists.value
        self._filtered = filtered.value
        self._stale = False
        return Ok(None)

    def _written(self, saved: Result[None, str], what: str) -> Result[None, TodoError]:
        """Turn a storage write result into a repository result and reload."""
        if isinstance(saved, Err):
            logger.error(f"Failed to save {what}: {saved.error}")
            return Err(TodoError.storage(f"failed to save {what}: {saved.error}"))
        return self._refresh()

    def _save_lists(self, lists: list[TaskList]) -> Result[None, TodoError]:
        names = ", ".join(f"'{task_list.name}'" for task_list in lists)
        return self._written(self._storage.save_lists(lists), f"lists {names}")

    def _name_taken(self, name: str) -> bool:
        return find_list(self._lists, name) is not None or any(
            filtered.name == name for filtered in self._filtered
        )

    # =========================================================================
    # Task helpers (operate on workspace copies)
    # =========================================================================

    def _locate(self, workspace: _Workspace, task_id: int) -> Result[tuple[TaskList, Task], TodoError]:
        owner = find_owner(self._lists, task_id)
        if owner is None:
            return Err(TodoError.not_found(f"task not found: {task_id}", id=task_id))
        working = workspace.get(owner.name)
        return Ok((working, find_task([working], task_id)))

    def _apply_done(self, task: Task, done: bool) -> None:
        if task.done == done:
            return
        task.done = done
        task.done_on = self._clock() if done else None

    def _apply_move(
        self,
        workspace: _Workspace,
        owner: TaskList,
        task: Task,
        target: str,
    ) -> Result[None, TodoError]:
        if task.list != owner.name or workspace.get(task.list) is None:
            logger.error(
                f"Task {task.id} references list '{task.list}' but is stored in "
                f"'{owner.name}'; known lists: {[known.name for known in self._lists]}"
            )
            return Err(
                TodoError.internal(
                    f"list {task.list!r} for task {task.id} not found",
                    id=task.id,
                    list=task.list,
                    stored_in=owner.name,
                )
            )

        destination = workspace.get(target)
        if destination is None:
            return Err(TodoError.not_found(f"list not found: {target}", list=target))
        if destination.name == owner.name:
            return Ok(None)

        remove_task(owner, task.id)
        task.list = destination.name
        destination.items.append(task)
        return Ok(None)

    # =========================================================================
    # Lists
    # =========================================================================

    @_guarded
    def list_names(self) -> Result[tuple[list[str], list[str]], TodoError]:
        """Return the names of all real lists and all filtered lists."""
        return Ok(
            (
                [task_list.name for task_list in self._lists],
                [filtered.name for filtered in self._filtered],
            )
        )

    @_guarded
    def get_list(self, name: str) -> Result[TaskList, TodoError]:
        """Return a copy of a real list and its tasks."""
        task_list = find_list(self._lists, name)
        if task_list is None:
            return Err(TodoError.not_found(f"list not found: {name}", list=name))
        return Ok(task_list.model_copy(deep=True))

    @_guarded
    def add_list(self, name: str, colour: Colour | None = None) -> Result[TaskList, TodoError]:
        """Create an empty list.

        Names are unique across real and filtered lists so the combined
        listing never shows the same name twice.
        """
        if not name.strip():
            return Err(TodoError.invalid_input("missing list name"))
        if self._name_taken(name):
            return Err(TodoError.already_exists(f"list already exists: {name}", list=name))

        task_list = TaskList(name=name, colour=colour or Colour())
        saved = self._save_lists([task_list])
        if isinstance(saved, Err):
            return saved

        logger.info(f"Added list '{name}'")
        return Ok(task_list.model_copy(deep=True))

    @_guarded
    def delete_list(self, name: str) -> Result[None, TodoError]:
        """Delete a list together with all of its tasks.

        Filtered lists are not touched. A ``list`` comparison naming the
        deleted list keeps decoding and evaluating, it just never matches
        that name again.
        """
        task_list = find_list(self._lists, name)
        if task_list is None:
            return Err(TodoError.not_found(f"list not found: {name}", list=name))

        referencing = [f.name for f in self._filtered if references_list(f.filter, name)]
        deleted = self._written(self._storage.delete_list(name), f"deletion of list '{name}'")
        if isinstance(deleted, Err):
            return deleted

        logger.info(f"Deleted list '{name}' with {len(task_list.items)} task(s)")
        if referencing:
            logger.warning(f"Filtered lists {referencing} still reference deleted list '{name}'")
        return Ok(None)

    # =========================================================================
    # Tasks
    # =========================================================================

    @_guarded
    def add_task(self, list_name: str, task: TaskAdd) -> Result[Task, TodoError]:
        """Append a new task to a list.

        The new ID is one more than the highest ID in the whole repository.
        """
        if find_list(self._lists, list_name) is None:
            return Err(TodoError.not_found(f"list not found: {list_name}", list=list_name))
        if not task.title.strip():
            return Err(TodoError.invalid_input("missing task title"))
        if task.due_on is not None and task.due_by is not None:
            return Err(TodoError.invalid_input("only one of due_on or due_by can be set"))

        due_kind, due = task.due_fields()
        try:
            item = Task(
                id=next_task_id(self._lists),
                title=task.title,
                list=list_name,
                all_day=task.all_day,
                priority=task.priority,
                due_kind=due_kind,
                due=due,
                created=self._clock(),
            )
        except ValidationError as e:
            return Err(TodoError.invalid_input(f"invalid task: {_validation_message(e)}"))

        workspace = _Workspace(self._lists)
        workspace.get(list_name).items.append(item)
        saved = self._save_lists(workspace.touched())
        if isinstance(saved, Err):
            return saved

        logger.info(f"Added task {item.id} to list '{list_name}'")
        return Ok(item.model_copy(deep=True))

    @_guarded
    def get_task(self, task_id: int) -> Result[Task, TodoError]:
        """Return a copy of a task."""
        task = find_task(self._lists, task_id)
        if task is None:
            return Err(TodoError.not_found(f"task not found: {task_id}", id=task_id))
        return Ok(task.model_copy(deep=True))

    @_guarded
    def delete_task(self, task_id: int) -> Result[None, TodoError]:
        """Remove a task from whichever list holds it."""
        workspace = _Workspace(self._lists)
        located = self._locate(workspace, task_id)
        if isinstance(located, Err):
            return located
        owner, _ = located.value

        remove_task(owner, task_id)
        saved = self._save_lists(workspace.touched())
        if isinstance(saved, Err):
            return saved

        logger.info(f"Deleted task {task_id} from list '{owner.name}'")
        return Ok(None)

    @_guarded
    def mark_done(self, task_id: int, done: bool) -> Result[Task, TodoError]:
        """Set the done flag, stamping or clearing the completion time."""
        workspace = _Workspace(self._lists)
        located = self._locate(workspace, task_id)
        if isinstance(located, Err):
            return located
        _, task = located.value

        self._apply_done(task, done)
        saved = self._save_lists(workspace.touched())
        if isinstance(saved, Err):
            return saved

        logger.info(f"Marked task {task_id} as {'done' if done else 'pending'}")
        return Ok(task.model_copy(deep=True))

    @_guarded
    def move_task(self, task_id: int, list_name: str) -> Result[Task, TodoError]:
        """Move a task to the end of another list."""
        workspace = _Workspace(self._lists)
        located = self._locate(workspace, task_id)
        if isinstance(located, Err):
            return located
        owner, task = located.value

        moved = self._apply_move(workspace, owner, task, list_name)
        if isinstance(moved, Err):
            return moved
        saved = self._save_lists(workspace.touched())
        if isinstance(saved, Err):
            return saved

        logger.info(f"Moved task {task_id} from '{owner.name}' to '{list_name}'")
        return Ok(task.model_copy(deep=True))

    @_guarded
    def update_task(self, task_id: int, change: TaskChange) -> Result[Task, TodoError]:
        """Apply a partial update to a task.

        Done and list changes go through the same steps as ``mark_done`` and
        ``move_task``; all touched lists are then saved together.
        """
        workspace = _Workspace(self._lists)
        located = self._locate(workspace, task_id)
        if isinstance(located, Err):
            return located
        owner, task = located.value

        if change.done is not None:
            self._apply_done(task, change.done)
        if change.list is not None and change.list != task.list:
            moved = self._apply_move(workspace, owner, task, change.list)
            if isinstance(moved, Err):
                return moved

        if change.title is not None:
            if not change.title.strip():
                return Err(TodoError.invalid_input("missing task title"))
            task.title = change.title
        if change.all_day is not None:
            task.all_day = change.all_day
        if change.priority is not None:
            task.priority = change.priority
        if change.due_kind is not None:
            task.due_kind = change.due_kind
            task.due = change.due

        try:
            Task.model_validate(task.model_dump())
        except ValidationError as e:
            return Err(TodoError.invalid_input(f"invalid task: {_validation_message(e)}"))

        saved = self._save_lists(workspace.touched())
        if isinstance(saved, Err):
            return saved

        logger.info(f"Updated task {task_id}")
        return Ok(task.model_copy(deep=True))

    # =========================================================================
    # Filtered lists
    # =========================================================================

    @_guarded
    def add_filtered_list(self, name: str, node: Node) -> Result[FilteredList, TodoError]:
        """Store a named filter. Redefining a filter means delete + add."""
        if not name.strip():
            return Err(TodoError.invalid_input("missing list name"))
        if self._name_taken(name):
            return Err(TodoError.already_exists(f"list already exists: {name}", list=name))

        filtered = FilteredList(name=name, filter=node)
        saved = self._written(
            self._storage.save_filtered_list(filtered), f"filtered list '{name}'"
        )
        if isinstance(saved, Err):
            return saved

        logger.info(f"Added filtered list '{name}'")
        return Ok(filtered)

    @_guarded
    def get_filtered_list(self, name: str) -> Result[FilteredList, TodoError]:
        """Return a filtered list definition."""
        for filtered in self._filtered:
            if filtered.name == name:
                return Ok(filtered)
        return Err(TodoError.not_found(f"filtered list not found: {name}", list=name))

    @_guarded
    def delete_filtered_list(self, name: str) -> Result[None, TodoError]:
        """Remove a filtered list definition."""
        if not any(filtered.name == name for filtered in self._filtered):
            return Err(TodoError.not_found(f"filtered list not found: {name}", list=name))

        deleted = self._written(
            self._storage.delete_filtered_list(name), f"deletion of filtered list '{name}'"
        )
        if isinstance(deleted, Err):
            return deleted

        logger.info(f"Deleted filtered list '{name}'")
        return Ok(None)

    @_guarded
    def resolve_filtered_list(
        self,
        name: str,
        now: datetime | None = None,
    ) -> Result[list[Task], TodoError]:
        """Evaluate a filtered list against the current tasks.

        Args:
            name: Filtered list name.
            now: Evaluation instant; defaults to the repository clock.

        Returns:
            Ok(matching tasks in list order, then task order) or NotFound.
        """
        found = self.get_filtered_list(name)
        if isinstance(found, Err):
            return found
        return self.filter_tasks(found.value.filter, now)

    @_guarded
    def filter_tasks(self, node: Node, now: datetime | None = None) -> Result[list[Task], TodoError]:
        """Evaluate an ad-hoc filter against the current tasks."""
        matches = filter_tasks(self._lists, node, now or self._clock())
        return Ok([task.model_copy(deep=True) for task in matches])
