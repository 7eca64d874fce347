"""Tests for lookups over task lists, filter resolution and the Result helpers."""

import pytest

from todolists.domain.filter import LogicalNode, LogicalOp, filter_tasks, new_filter, overdue
from todolists.domain.shared import (
    Err,
    ErrorKind,
    Ok,
    TodoError,
    TodoException,
    flat_map,
    unwrap,
)
from todolists.domain.task import (
    TaskList,
    collect_tasks,
    find_list,
    find_owner,
    find_task,
    iter_tasks,
    next_task_id,
    remove_task,
)


def build_lists(make_task):
    return [
        TaskList(name="Home", items=[make_task(id=1), make_task(id=4)]),
        TaskList(name="Work", items=[make_task(id=2, list="Work")]),
        TaskList(name="Empty"),
    ]


def test_iter_tasks_scan_order(make_task):
    assert [t.id for t in iter_tasks(build_lists(make_task))] == [1, 4, 2]


def test_lookups(make_task):
    lists = build_lists(make_task)
    assert find_list(lists, "Work").name == "Work"
    assert find_list(lists, "Nope") is None
    assert find_task(lists, 2).list == "Work"
    assert find_task(lists, 9) is None
    assert find_owner(lists, 4).name == "Home"
    assert find_owner(lists, 9) is None


def test_next_task_id(make_task):
    assert next_task_id(build_lists(make_task)) == 5
    assert next_task_id([]) == 1


def test_remove_task(make_task):
    home = build_lists(make_task)[0]
    assert remove_task(home, 1).id == 1
    assert [t.id for t in home.items] == [4]
    assert remove_task(home, 1) is None


def test_collect_tasks(make_task):
    matches = collect_tasks(build_lists(make_task), lambda task: task.id % 2 == 0)
    assert [t.id for t in matches] == [4, 2]


def test_flat_map_chains_only_ok():
    assert flat_map(Ok(2), lambda v: Ok(v * 2)) == Ok(4)
    assert flat_map(Ok(2), lambda v: Err(f"bad {v}")) == Err("bad 2")
    assert flat_map(Err("x"), lambda v: Ok(v * 2)) == Err("x")


def test_unwrap():
    assert unwrap(Ok(3)) == 3
    with pytest.raises(TodoException) as excinfo:
        unwrap(Err(TodoError.not_found("list not found: Home", list="Home")))
    assert excinfo.value.error.kind == ErrorKind.NOT_FOUND
    assert excinfo.value.error.details == {"list": "Home"}


def test_filter_tasks_resolves_over_all_lists(make_task, at, now):
    lists = [
        TaskList(name="Home", items=[make_task(id=1), make_task(id=3, due_by=at(-1, 9))]),
        TaskList(name="Work", items=[make_task(id=2, list="Work", all_day=True, due_by=at(-2))]),
    ]
    assert [t.id for t in filter_tasks(lists, overdue(), now)] == [3, 2]
    assert [t.id for t in filter_tasks(lists, new_filter(), now)] == [1, 3, 2]
    assert filter_tasks(lists, LogicalNode(LogicalOp.OR), now) == []
