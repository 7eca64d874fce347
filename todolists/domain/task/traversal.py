"""Pure lookups over a sequence of task lists.

All functions in this module are pure - no I/O, no side effects.
They take lists in and return tasks, lists or positions out.
"""

from collections.abc import Callable, Iterator, Sequence

from .models import Task, TaskList


def iter_tasks(lists: Sequence[TaskList]) -> Iterator[Task]:
    """Yield every task in list order, then task order within each list."""
    for task_list in lists:
        yield from task_list.items


def find_list(lists: Sequence[TaskList], name: str) -> TaskList | None:
    """Find a list by name."""
    for task_list in lists:
        if task_list.name == name:
            return task_list
    return None


def find_task(lists: Sequence[TaskList], task_id: int) -> Task | None:
    """Find a task by ID across all lists."""
    for task in iter_tasks(lists):
        if task.id == task_id:
            return task
    return None


def find_owner(lists: Sequence[TaskList], task_id: int) -> TaskList | None:
    """Find the list whose items contain the task with the given ID."""
    for task_list in lists:
        if any(task.id == task_id for task in task_list.items):
            return task_list
    return None


def remove_task(task_list: TaskList, task_id: int) -> Task | None:
    """Remove a task from a list in place, returning it if it was present."""
    for index, task in enumerate(task_list.items):
        if task.id == task_id:
            return task_list.items.pop(index)
    return None


def next_task_id(lists: Sequence[TaskList]) -> int:
    """Return one more than the highest task ID in the whole repository.

    Scans every task on each call, so IDs are never reused while a higher
    one is still present.
    """
    return max((task.id for task in iter_tasks(lists)), default=0) + 1


def collect_tasks(
    lists: Sequence[TaskList],
    predicate: Callable[[Task], bool],
) -> list[Task]:
    """Collect tasks matching a predicate, preserving scan order.

    Each task is tested once, so a task appears at most once in the result.

    Args:
        lists: Lists to scan
        predicate: Function (task) -> bool

    Returns:
        Matching tasks in list order, then task order
    """
    return [task for task in iter_tasks(lists) if predicate(task)]
