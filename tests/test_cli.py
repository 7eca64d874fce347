"""Tests for the Typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from todolists import __version__
from todolists.interfaces.cli import app
from todolists.interfaces.cli.commands import filtered

runner = CliRunner()


@pytest.fixture
def data(tmp_path):
    return str(tmp_path / "db.json")


def invoke(*args):
    return runner.invoke(app, list(args))


def test_version():
    result = invoke("--version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_and_task_workflow(data):
    assert invoke("list", "add", "Home", "--colour", "#ffa500", "--data", data).exit_code == 0
    assert invoke("list", "add", "Work", "--data", data).exit_code == 0

    result = invoke("task", "add", "Home", "Buy avocados", "--all-day", "--due-by", "2026-06-12", "--data", data)
    assert result.exit_code == 0, result.output
    assert "#1" in result.output

    result = invoke("task", "move", "1", "Work", "--data", data)
    assert result.exit_code == 0
    assert "Work" in result.output

    result = invoke("task", "done", "1", "--data", data)
    assert result.exit_code == 0
    assert "done" in result.output

    result = invoke("list", "show", "Work", "--data", data)
    assert result.exit_code == 0
    assert "[x] #1 Buy avocados (due by 2026-06-12)" in result.output

    result = invoke("task", "show", "1", "--data", data)
    assert result.exit_code == 0
    assert "list:     Work" in result.output

    result = invoke("lists", "--data", data)
    assert "- Home" in result.output and "- Work" in result.output


def test_data_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "env.json"
    monkeypatch.setenv("TODOLISTS_DATA", str(path))
    assert invoke("list", "add", "Home").exit_code == 0
    assert json.loads(path.read_text(encoding="utf-8"))["lists"][0]["name"] == "Home"


def test_errors_exit_with_status_1(data):
    result = invoke("list", "show", "Nope", "--data", data)
    assert result.exit_code == 1
    assert "Error: list not found: Nope" in result.output

    invoke("list", "add", "Home", "--data", data)
    result = invoke("list", "add", "Home", "--data", data)
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_invalid_colour(data):
    result = invoke("list", "add", "Home", "--colour", "orange", "--data", data)
    assert result.exit_code == 1
    assert "invalid hex colour" in result.output


def test_filtered_from_json(data):
    invoke("list", "add", "Home", "--data", data)
    invoke("task", "add", "Home", "Learn Python", "--data", data)
    invoke("task", "add", "Home", "Walk the cat", "--data", data)
    invoke("task", "done", "2", "--data", data)

    node = {"operator": "AND", "children": [{"field": "done", "op": "==", "value": "false"}]}
    result = invoke("filtered", "add", "Open", "--filter", json.dumps(node), "--data", data)
    assert result.exit_code == 0, result.output

    result = invoke("filtered", "show", "Open", "--data", data)
    assert result.exit_code == 0
    assert "Learn Python" in result.output
    assert "Walk the cat" not in result.output

    result = invoke("filtered", "show", "Open", "--definition", "--data", data)
    assert json.loads(result.output) == node

    assert "- Open (filtered)" in invoke("lists", "--data", data).output
    assert invoke("filtered", "delete", "Open", "--data", data).exit_code == 0


def test_filtered_help_example_decodes(data):
    example = filtered.__doc__.split("--filter '", 1)[1].split("'", 1)[0]
    assert json.loads(example)["operator"] == "AND"
    result = invoke("filtered", "add", "Urgent", "--filter", example, "--data", data)
    assert result.exit_code == 0, result.output


def test_filtered_preset(data):
    result = invoke("filtered", "add", "Soon", "--preset", "soon", "--data", data)
    assert result.exit_code == 0
    result = invoke("filtered", "show", "Soon", "--data", data)
    assert result.exit_code == 0
    assert "(no tasks)" in result.output


@pytest.mark.parametrize(
    "args,fragment",
    [
        (["--filter", "{oops"], "Invalid JSON"),
        (["--filter", '{"field": "done", "op": "==", "value": "maybe"}'], "expected 'true' or 'false'"),
        (["--preset", "later"], "Unknown preset"),
        ([], "exactly one of"),
    ],
)
def test_filtered_add_errors(data, args, fragment):
    result = invoke("filtered", "add", "Bad", *args, "--data", data)
    assert result.exit_code == 1
    assert fragment in result.output
