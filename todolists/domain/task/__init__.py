"""Task domain - lists, tasks and their invariants.

All exports are pure (no I/O, no side effects).

Key Types:
    Task - A task owned by one list
    TaskList - A named, ordered list of tasks
    DueKind - Due date kind (none, due on, due by)
    TaskAdd - Fields for creating a task
    TaskChange - Partial task update

Traversal Functions:
    iter_tasks - All tasks in scan order
    find_list - Look up a list by name
    find_task - Look up a task by ID
    find_owner - Look up the list holding a task
    remove_task - Remove a task from a list
    next_task_id - Next repository-wide task ID
    collect_tasks - Collect tasks matching a predicate
"""

from .models import (
    PRIORITY_HIGH,
    PRIORITY_HIGHEST,
    PRIORITY_LOW,
    PRIORITY_LOWEST,
    PRIORITY_NORMAL,
    DueKind,
    Task,
    TaskAdd,
    TaskChange,
    TaskList,
)
from .traversal import (
    collect_tasks,
    find_list,
    find_owner,
    find_task,
    iter_tasks,
    next_task_id,
    remove_task,
)

__all__ = [
    # Models
    "DueKind",
    "Task",
    "TaskList",
    "TaskAdd",
    "TaskChange",
    "PRIORITY_LOWEST",
    "PRIORITY_LOW",
    "PRIORITY_NORMAL",
    "PRIORITY_HIGH",
    "PRIORITY_HIGHEST",
    # Traversal
    "iter_tasks",
    "find_list",
    "find_owner",
    "find_task",
    "remove_task",
    "next_task_id",
    "collect_tasks",
]
