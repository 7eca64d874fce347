"""Task domain models.

Pure domain models for lists and the tasks they own. Uses Pydantic for
validation and for serialization through the storage layer.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from todolists.domain.shared.clock import local_now, start_of_day, to_local
from todolists.domain.types import Colour

PRIORITY_LOWEST = -2
PRIORITY_LOW = -1
PRIORITY_NORMAL = 0
PRIORITY_HIGH = 1
PRIORITY_HIGHEST = 2


class DueKind(str, Enum):
    """Kind of due date a task carries. The kinds are mutually exclusive."""

    NONE = "none"
    DUE_ON = "due_on"
    DUE_BY = "due_by"


def _local(value: datetime | None) -> datetime | None:
    return to_local(value) if value is not None else None


class Task(BaseModel):
    """A single task owned by exactly one list.

    ``due`` is set iff ``due_kind`` is not NONE, and ``done_on`` is set iff
    ``done`` is true. Both invariants are checked on construction.
    """

    id: int
    title: str = Field(min_length=1)
    list: str
    done: bool = False
    priority: int = Field(default=PRIORITY_NORMAL, ge=PRIORITY_LOWEST, le=PRIORITY_HIGHEST)
    all_day: bool = False
    due_kind: DueKind = DueKind.NONE
    due: datetime | None = None
    created: datetime = Field(default_factory=local_now)
    done_on: datetime | None = None

    @field_validator("due", "created", "done_on")
    @classmethod
    def _as_local(cls, value: datetime | None) -> datetime | None:
        return _local(value)

    @model_validator(mode="after")
    def _check_invariants(self) -> "Task":
        if (self.due_kind == DueKind.NONE) != (self.due is None):
            raise ValueError("due must be set if and only if due_kind is not none")
        if self.done != (self.done_on is not None):
            raise ValueError("done_on must be set if and only if the task is done")
        return self

    def has_due_date(self) -> bool:
        """Return True if the task has a due-on or due-by date."""
        return self.due_kind != DueKind.NONE

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Check whether the task is past its due date.

        Done tasks and tasks without a due date are never overdue. All-day
        tasks become overdue once their day has passed; timed tasks once
        their instant has passed.
        """
        if self.done or self.due is None:
            return False
        now = to_local(now) if now is not None else local_now()
        if self.all_day:
            return self.due < start_of_day(now)
        return self.due < now


class TaskList(BaseModel):
    """A named, ordered list of tasks."""

    name: str = Field(min_length=1)
    colour: Colour = Field(default_factory=Colour)
    items: list[Task] = Field(default_factory=list)


class TaskAdd(BaseModel):
    """Fields accepted when creating a task.

    At most one of ``due_on`` and ``due_by`` may be given; the repository
    rejects requests carrying both.
    """

    title: str
    all_day: bool = False
    priority: int = Field(default=PRIORITY_NORMAL, ge=PRIORITY_LOWEST, le=PRIORITY_HIGHEST)
    due_on: datetime | None = None
    due_by: datetime | None = None

    @field_validator("due_on", "due_by")
    @classmethod
    def _as_local(cls, value: datetime | None) -> datetime | None:
        return _local(value)

    def due_fields(self) -> tuple[DueKind, datetime | None]:
        """Return the due kind and date implied by the request."""
        if self.due_on is not None:
            return DueKind.DUE_ON, self.due_on
        if self.due_by is not None:
            return DueKind.DUE_BY, self.due_by
        return DueKind.NONE, None


class TaskChange(BaseModel):
    """Partial update of a task. ``None`` keeps the current value.

    The due date only changes when ``due_kind`` is given.
    """

    title: str | None = None
    list: str | None = None
    done: bool | None = None
    all_day: bool | None = None
    priority: int | None = Field(default=None, ge=PRIORITY_LOWEST, le=PRIORITY_HIGHEST)
    due_kind: DueKind | None = None
    due: datetime | None = None

    @field_validator("due")
    @classmethod
    def _as_local(cls, value: datetime | None) -> datetime | None:
        return _local(value)

    @model_validator(mode="after")
    def _check_due(self) -> "TaskChange":
        if self.due_kind is None:
            if self.due is not None:
                raise ValueError("due requires due_kind")
        elif self.due_kind == DueKind.NONE:
            if self.due is not None:
                raise ValueError("due must be empty when due_kind is none")
        elif self.due is None:
            raise ValueError(f"due is required when due_kind is {self.due_kind.value}")
        return self
