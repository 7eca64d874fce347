"""Comparison compiler.

Turns a ``(field, op, value)`` triple into a predicate over a task. The
triple is the persisted form of a comparison; the predicate is a pure
function of it, so compiling the same triple twice yields predicates that
behave identically.

Every field supports exactly one operator:

    list      in         comma-separated list names, empty matches every list
    done      ==         "true" or "false"
    done_on   next_days  n <= 0, done within the last -n days (0 = today)
    due_by    next_days  n >= 0, due-by date within the next n days, not overdue
    due_on    next_days  n >= 0, due-on date within the next n days, not overdue
    due_none  unset      value ignored, task has no due date
    due_kind  ==         "none", "due_on" or "due_by"
    overdue   ==         "true" or "false"

Day-level comparisons truncate timestamps to the local calendar day. The
``next_days`` horizon is always a calendar day; whether a task already
counts as overdue follows ``Task.is_overdue`` (day-level for all-day tasks,
instant-level for timed tasks).
"""

from collections.abc import Callable
from datetime import datetime
from enum import Enum

from todolists.domain.shared.clock import day_of, days_from
from todolists.domain.shared.result import Err, Ok, Result
from todolists.domain.task.models import DueKind, Task

TaskPredicate = Callable[[Task, datetime], bool]

# Keeps today +/- n inside the range of datetime.date.
MAX_DAYS = 36500


class FilterField(str, Enum):
    """Task attribute a comparison looks at."""

    LIST = "list"
    DONE = "done"
    DONE_ON = "done_on"
    DUE_BY = "due_by"
    DUE_ON = "due_on"
    DUE_NONE = "due_none"
    DUE_KIND = "due_kind"
    OVERDUE = "overdue"


class ComparisonOp(str, Enum):
    """Comparison operator tokens."""

    IN = "in"
    EQ = "=="
    NEXT_DAYS = "next_days"
    UNSET = "unset"


FIELD_OPERATORS: dict[FilterField, ComparisonOp] = {
    FilterField.LIST: ComparisonOp.IN,
    FilterField.DONE: ComparisonOp.EQ,
    FilterField.DONE_ON: ComparisonOp.NEXT_DAYS,
    FilterField.DUE_BY: ComparisonOp.NEXT_DAYS,
    FilterField.DUE_ON: ComparisonOp.NEXT_DAYS,
    FilterField.DUE_NONE: ComparisonOp.UNSET,
    FilterField.DUE_KIND: ComparisonOp.EQ,
    FilterField.OVERDUE: ComparisonOp.EQ,
}


def default_operator(field: str) -> str | None:
    """Return the operator token a field uses, or None for unknown fields."""
    try:
        return FIELD_OPERATORS[FilterField(field)].value
    except ValueError:
        return None


def compile_comparison(field: str, op: str, value: str) -> Result[TaskPredicate, str]:
    """Compile a comparison triple into a task predicate.

    Args:
        field: Field token, e.g. "due_by"
        op: Operator token, must be the one the field supports
        value: Literal value as text

    Returns:
        Ok(predicate) taking (task, now), or Err(str) describing why the
        triple is invalid.
    """
    try:
        parsed_field = FilterField(field)
    except ValueError:
        return Err(f"unsupported field for filter: {field!r}")

    expected = FIELD_OPERATORS[parsed_field]
    if op != expected.value:
        return Err(
            f"unsupported operator for {field}: {op!r} (expected {expected.value!r})"
        )

    if parsed_field == FilterField.LIST:
        return _compile_list(value)
    if parsed_field == FilterField.DONE:
        return _compile_done(value)
    if parsed_field == FilterField.DONE_ON:
        return _compile_done_on(value)
    if parsed_field == FilterField.DUE_BY:
        return _compile_due(DueKind.DUE_BY, field, value)
    if parsed_field == FilterField.DUE_ON:
        return _compile_due(DueKind.DUE_ON, field, value)
    if parsed_field == FilterField.DUE_NONE:
        return Ok(_no_due_date)
    if parsed_field == FilterField.DUE_KIND:
        return _compile_due_kind(value)
    return _compile_overdue(value)


def _parse_bool(field: str, value: str) -> Result[bool, str]:
    if value == "true":
        return Ok(True)
    if value == "false":
        return Ok(False)
    return Err(f"invalid value for {field}: {value!r} (expected 'true' or 'false')")


def _parse_days(field: str, value: str) -> Result[int, str]:
    try:
        days = int(value.strip())
    except ValueError:
        return Err(f"invalid value for {field}: {value!r} (expected a number of days)")
    if abs(days) > MAX_DAYS:
        return Err(f"invalid value for {field}: {days} (at most {MAX_DAYS} days either way)")
    return Ok(days)


def _compile_list(value: str) -> Result[TaskPredicate, str]:
    names = frozenset(name.strip() for name in value.split(",") if name.strip())

    def in_lists(task: Task, now: datetime) -> bool:
        return not names or task.list in names

    return Ok(in_lists)


def _compile_done(value: str) -> Result[TaskPredicate, str]:
    parsed = _parse_bool("done", value)
    if isinstance(parsed, Err):
        return parsed
    expected = parsed.value

    def done_is(task: Task, now: datetime) -> bool:
        return task.done == expected

    return Ok(done_is)


def _compile_done_on(value: str) -> Result[TaskPredicate, str]:
    parsed = _parse_days("done_on", value)
    if isinstance(parsed, Err):
        return parsed
    days = parsed.value
    if days > 0:
        return Err(f"invalid value for done_on: {days} (must be zero or negative)")

    def done_within(task: Task, now: datetime) -> bool:
        if not task.done or task.done_on is None:
            return False
        return days_from(now, days) <= day_of(task.done_on) <= day_of(now)

    return Ok(done_within)


def _compile_due(kind: DueKind, field: str, value: str) -> Result[TaskPredicate, str]:
    parsed = _parse_days(field, value)
    if isinstance(parsed, Err):
        return parsed
    days = parsed.value
    if days < 0:
        return Err(f"invalid value for {field}: {days} (must be zero or positive)")

    def due_within(task: Task, now: datetime) -> bool:
        if task.due_kind != kind or task.due is None:
            return False
        if task.is_overdue(now):
            return False
        return day_of(task.due) <= days_from(now, days)

    return Ok(due_within)


def _no_due_date(task: Task, now: datetime) -> bool:
    return task.due_kind == DueKind.NONE


def _compile_due_kind(value: str) -> Result[TaskPredicate, str]:
    try:
        expected = DueKind(value)
    except ValueError:
        return Err(f"invalid value for due_kind: {value!r} (expected 'none', 'due_on' or 'due_by')")

    def due_kind_is(task: Task, now: datetime) -> bool:
        return task.due_kind == expected

    return Ok(due_kind_is)


def _compile_overdue(value: str) -> Result[TaskPredicate, str]:
    parsed = _parse_bool("overdue", value)
    if isinstance(parsed, Err):
        return parsed
    expected = parsed.value

    def overdue_is(task: Task, now: datetime) -> bool:
        return task.is_overdue(now) == expected

    return Ok(overdue_is)
