"""Shared fixtures for todolists tests.

Every test evaluates against a fixed instant: 2026-06-10 20:00 local time.
"""

from datetime import datetime, time, timedelta

import pytest

from todolists.application import Repository
from todolists.domain.task import DueKind, Task
from todolists.infrastructure.storage import MemoryStorage

NOW = datetime(2026, 6, 10, 20, 0).astimezone()


def local_at(days: int = 0, hour: int = 0, minute: int = 0) -> datetime:
    """Local datetime ``days`` days from NOW's day at ``hour:minute``."""
    day = NOW.date() + timedelta(days=days)
    return datetime.combine(day, time(hour=hour, minute=minute)).astimezone()


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep config and data files out of the real home directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("TODOLISTS_HOME", str(home))
    for name in ("TODOLISTS_DATA", "TODOLISTS_HOST", "TODOLISTS_PORT", "TODOLISTS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return home


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def at():
    return local_at


@pytest.fixture
def make_task():
    """Factory for standalone tasks (not stored in any repository)."""

    def _make(**overrides) -> Task:
        fields = {
            "id": 1,
            "title": "Task",
            "list": "Home",
            "created": NOW - timedelta(days=7),
        }
        if "due_by" in overrides:
            fields["due_kind"] = DueKind.DUE_BY
            fields["due"] = overrides.pop("due_by")
        if "due_on" in overrides:
            fields["due_kind"] = DueKind.DUE_ON
            fields["due"] = overrides.pop("due_on")
        fields.update(overrides)
        return Task(**fields)

    return _make


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def repo(storage) -> Repository:
    return Repository(storage, clock=lambda: NOW)
