"""Demo data for trying the app without an existing data file."""

from datetime import datetime, time, timedelta

from todolists.application.repository import Repository
from todolists.domain.filter import (
    due,
    due_by_in_days,
    due_on_today,
    new_filter,
    no_due_date,
    pending_or_done_today,
)
from todolists.domain.shared import local_now, unwrap
from todolists.domain.task import TaskAdd
from todolists.domain.types import Colour


def _at(days: int, hour: int, now: datetime) -> datetime:
    day = now.date() + timedelta(days=days)
    return datetime.combine(day, time(hour=hour), tzinfo=now.tzinfo)


def soon_filter():
    """Pending (or done today) tasks that are due today, due within two weeks, or undated."""
    return new_filter(
        pending_or_done_today(),
        due(
            due_on_today(),
            due_by_in_days(14),
            no_due_date(),
        ),
    )


def add_demo_data(repo: Repository, now: datetime | None = None) -> None:
    """Populate a repository with two lists and a "Soon" filtered list.

    Raises:
        TodoException: If any step fails (e.g. the lists already exist).
    """
    now = now or local_now()

    home = [
        TaskAdd(title="Buy avocados", all_day=True, due_by=_at(2, 0, now)),
        TaskAdd(title="Walk the cat", due_on=now + timedelta(hours=2)),
        TaskAdd(title="Write task app", due_by=now + timedelta(hours=24)),
        TaskAdd(title="Learn Python"),
        TaskAdd(title="Cook dinner", due_on=_at(0, 18, now)),
        TaskAdd(title="Wash the dishes", all_day=True, due_by=_at(0, 0, now)),
        TaskAdd(title="Something overdue", all_day=True, due_by=_at(-1, 0, now)),
    ]
    work = [
        TaskAdd(title="Write report"),
        TaskAdd(title="Prepare presentation", all_day=True, due_by=_at(5, 0, now)),
        TaskAdd(title="Call client", due_by=_at(3, 9, now)),
        TaskAdd(title="Write an email", all_day=True, due_on=_at(0, 0, now)),
    ]

    for name, colour, tasks in (
        ("Home", Colour(255, 165, 0), home),
        ("Work", Colour(0, 0, 255), work),
    ):
        unwrap(repo.add_list(name, colour))
        for task in tasks:
            unwrap(repo.add_task(name, task))

    unwrap(repo.add_filtered_list("Soon", soon_filter()))
