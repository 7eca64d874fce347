"""Convenience constructors for common filters.

The builders compose the two node shapes into the idioms used by the
default virtual lists. Arguments are fixed by the caller's code, so invalid
ones raise ``ValueError`` instead of returning a Result.

Example:
    soon = new_filter(
        pending_or_done_today(),
        due(due_on_today(), due_by_in_days(14), no_due_date()),
    )
"""

from todolists.domain.shared.result import Err
from todolists.domain.task.models import DueKind

from .compiler import FilterField
from .nodes import ComparisonNode, LogicalNode, LogicalOp, Node


def _comparison(field: FilterField, value: str = "") -> ComparisonNode:
    result = ComparisonNode.create(field.value, value=value)
    if isinstance(result, Err):
        raise ValueError(result.error.message)
    return result.value


def new_filter(*nodes: Node) -> LogicalNode:
    """Combine nodes into a root filter that requires all of them."""
    return LogicalNode(LogicalOp.AND, nodes)


def due(*nodes: Node) -> LogicalNode:
    """Combine due date filters so that any of them may match."""
    return LogicalNode(LogicalOp.OR, nodes)


def pending() -> ComparisonNode:
    """Accept tasks that are not done yet."""
    return _comparison(FilterField.DONE, "false")


def pending_or_done_today() -> LogicalNode:
    """Accept pending tasks, and done tasks if they were completed today."""
    return LogicalNode(
        LogicalOp.OR,
        (pending(), _comparison(FilterField.DONE_ON, "0")),
    )


def overdue() -> ComparisonNode:
    """Accept tasks that are past their due date."""
    return _comparison(FilterField.OVERDUE, "true")


def due_by_in_days(n: int) -> ComparisonNode:
    """Accept tasks with a due-by date within the next ``n`` days (not overdue)."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return _comparison(FilterField.DUE_BY, str(n))


def due_on_in_days(n: int) -> ComparisonNode:
    """Accept tasks with a due-on date within the next ``n`` days (not overdue)."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    return _comparison(FilterField.DUE_ON, str(n))


def due_on_today() -> LogicalNode:
    """Accept due-on tasks that fall on today or are already overdue.

    Overdue due-by tasks do not match.
    """
    overdue_due_on = LogicalNode(
        LogicalOp.AND,
        (overdue(), _comparison(FilterField.DUE_KIND, DueKind.DUE_ON.value)),
    )
    return LogicalNode(LogicalOp.OR, (overdue_due_on, due_on_in_days(0)))


def no_due_date() -> ComparisonNode:
    """Accept tasks without a due date."""
    return _comparison(FilterField.DUE_NONE)


def in_lists(*names: str) -> ComparisonNode:
    """Accept tasks that belong to one of the named lists (any list if none given)."""
    return _comparison(FilterField.LIST, ",".join(names))
