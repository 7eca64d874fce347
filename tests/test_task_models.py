"""Tests for task models, their invariants and the Colour value object."""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from todolists.domain.task import DueKind, Task, TaskAdd, TaskChange, TaskList
from todolists.domain.types import Colour


class TestTaskInvariants:
    def test_due_requires_due_kind(self, now):
        with pytest.raises(ValidationError):
            Task(id=1, title="t", list="Home", due=now)

    def test_due_kind_requires_due(self):
        with pytest.raises(ValidationError):
            Task(id=1, title="t", list="Home", due_kind=DueKind.DUE_BY)

    def test_done_requires_done_on(self):
        with pytest.raises(ValidationError):
            Task(id=1, title="t", list="Home", done=True)

    def test_done_on_requires_done(self, now):
        with pytest.raises(ValidationError):
            Task(id=1, title="t", list="Home", done_on=now)

    def test_empty_title_rejected(self):
        with pytest.raises(ValidationError):
            Task(id=1, title="", list="Home")

    def test_priority_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            Task(id=1, title="t", list="Home", priority=3)

    def test_naive_datetimes_become_local(self):
        task = Task(
            id=1,
            title="t",
            list="Home",
            due_kind=DueKind.DUE_ON,
            due=datetime(2026, 6, 11, 9, 30),
        )
        assert task.due.tzinfo is not None
        assert (task.due.hour, task.due.minute) == (9, 30)


class TestIsOverdue:
    def test_all_day_due_yesterday_is_overdue(self, make_task, at, now):
        assert make_task(all_day=True, due_by=at(-1)).is_overdue(now)

    def test_all_day_due_today_is_not_overdue_late_in_the_day(self, make_task, at, now):
        assert not make_task(all_day=True, due_by=at(0)).is_overdue(now)

    def test_timed_due_earlier_today_is_overdue(self, make_task, now):
        assert make_task(due_on=now - timedelta(hours=1)).is_overdue(now)

    def test_timed_due_later_today_is_not_overdue(self, make_task, now):
        assert not make_task(due_on=now + timedelta(hours=1)).is_overdue(now)

    def test_done_task_is_never_overdue(self, make_task, at, now):
        task = make_task(all_day=True, due_by=at(-3), done=True, done_on=now)
        assert not task.is_overdue(now)

    def test_task_without_due_date_is_never_overdue(self, make_task, now):
        task = make_task()
        assert not task.has_due_date()
        assert not task.is_overdue(now)


class TestTaskAdd:
    def test_due_fields_prefers_given_kind(self, now):
        assert TaskAdd(title="t", due_on=now).due_fields() == (DueKind.DUE_ON, now)
        assert TaskAdd(title="t", due_by=now).due_fields() == (DueKind.DUE_BY, now)
        assert TaskAdd(title="t").due_fields() == (DueKind.NONE, None)


class TestTaskChange:
    def test_due_without_kind_rejected(self, now):
        with pytest.raises(ValidationError):
            TaskChange(due=now)

    def test_dated_kind_without_due_rejected(self):
        with pytest.raises(ValidationError):
            TaskChange(due_kind=DueKind.DUE_ON)

    def test_clearing_due_date(self):
        change = TaskChange(due_kind=DueKind.NONE)
        assert change.due is None

    def test_none_kind_with_due_rejected(self, now):
        with pytest.raises(ValidationError):
            TaskChange(due_kind=DueKind.NONE, due=now)


class TestColour:
    def test_from_hex_round_trips(self):
        colour = Colour.from_hex("#ffa500")
        assert (colour.r, colour.g, colour.b) == (255, 165, 0)
        assert str(colour) == "#ffa500"

    def test_default_is_grey(self):
        assert str(Colour()) == "#808080"

    def test_invalid_hex_rejected(self):
        with pytest.raises(ValueError):
            Colour.from_hex("orange")

    def test_channel_out_of_range_rejected(self):
        with pytest.raises(ValueError):
            Colour(256, 0, 0)

    def test_task_list_serializes_colour(self):
        task_list = TaskList(name="Work", colour=Colour(0, 0, 255))
        data = task_list.model_dump(mode="json")
        assert data["colour"] == {"r": 0, "g": 0, "b": 255}
        assert TaskList.model_validate(data) == task_list
