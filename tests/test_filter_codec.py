"""Tests for the persisted filter form and FilteredList."""

import json

import pytest

from todolists.application import soon_filter
from todolists.domain.filter import (
    FilteredList,
    LogicalNode,
    LogicalOp,
    decode,
    due_by_in_days,
    due_on_in_days,
    encode,
    in_lists,
    new_filter,
    no_due_date,
    overdue,
    pending,
    pending_or_done_today,
)
from todolists.domain.shared import Err, ErrorKind, Ok


@pytest.fixture
def corpus(make_task, at, now):
    return [
        make_task(id=1),
        make_task(id=2, list="Work", due_on=at(0, 22)),
        make_task(id=3, all_day=True, due_by=at(-1)),
        make_task(id=4, list="Work", all_day=True, due_by=at(5)),
        make_task(id=5, done=True, done_on=at(0, 9)),
        make_task(id=6, done=True, done_on=at(-3, 9), due_by=at(-4, 12)),
        make_task(id=7, list="Shopping", due_on=at(2, 2)),
    ]


FILTERS = [
    soon_filter(),
    new_filter(),
    LogicalNode(LogicalOp.OR),
    new_filter(in_lists("Work"), pending()),
    LogicalNode(LogicalOp.OR, (overdue(), due_on_in_days(1), due_by_in_days(7))),
    new_filter(pending_or_done_today(), new_filter(no_due_date())),
]


@pytest.mark.parametrize("node", FILTERS)
def test_round_trip_evaluates_identically(node, corpus, now):
    persisted = json.loads(json.dumps(encode(node)))
    decoded = decode(persisted)
    assert isinstance(decoded, Ok)
    assert decoded.value == node
    assert [decoded.value.evaluate(t, now) for t in corpus] == [node.evaluate(t, now) for t in corpus]


def test_encoded_shape():
    assert encode(new_filter(pending())) == {
        "operator": "AND",
        "children": [{"field": "done", "op": "==", "value": "false"}],
    }


def test_missing_children_decode_as_empty():
    result = decode({"operator": "OR", "children": None})
    assert isinstance(result, Ok)
    assert result.value == LogicalNode(LogicalOp.OR)


class TestDecodeErrors:
    def test_nested_unknown_operator_names_path(self):
        data = {
            "operator": "AND",
            "children": [
                {"field": "done", "op": "==", "value": "false"},
                {"operator": "XOR", "children": []},
            ],
        }
        result = decode(data)
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.DECODE_ERROR
        assert result.error.details["path"] == "filter.children[1]"
        assert "XOR" in result.error.message

    def test_corrupt_triple(self):
        result = decode({"field": "done", "op": "==", "value": "maybe"})
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.DECODE_ERROR
        assert "expected 'true' or 'false'" in result.error.message

    @pytest.mark.parametrize(
        "data,fragment",
        [
            ({"field": "done", "op": "=="}, "missing 'value'"),
            ({"field": "done", "op": "==", "value": False}, "'value' must be a string"),
            ({"field": "done", "op": "", "value": "false"}, "empty operator"),
            ({"operator": "AND", "children": {"field": "done"}}, "'children' must be a list"),
            ({"value": "x"}, "neither 'operator' nor 'field'"),
            (["AND"], "expected a mapping"),
            ({"field": "priority", "op": "==", "value": "1"}, "unsupported field"),
            ({"field": "due_by", "op": "next_days", "value": "3000000"}, "at most"),
            ({"field": "done_on", "op": "next_days", "value": "-3000000"}, "at most"),
        ],
    )
    def test_malformed_nodes(self, data, fragment):
        result = decode(data)
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.DECODE_ERROR
        assert fragment in result.error.message


class TestFilteredList:
    def test_round_trip(self):
        filtered = FilteredList(name="Soon", filter=soon_filter())
        restored = FilteredList.from_dict(json.loads(json.dumps(filtered.to_dict())))
        assert isinstance(restored, Ok)
        assert restored.value == filtered

    def test_decode_error_names_list(self):
        result = FilteredList.from_dict(
            {"name": "Broken", "filter": {"field": "due_on", "op": "next_days", "value": "-1"}}
        )
        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.DECODE_ERROR
        assert result.error.message.startswith("filtered list 'Broken': ")
        assert result.error.details["list"] == "Broken"

    def test_missing_name(self):
        result = FilteredList.from_dict({"filter": {"operator": "AND", "children": []}})
        assert isinstance(result, Err)
