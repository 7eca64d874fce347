"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from todolists.application import Repository
from todolists.config import AppConfig
from todolists.infrastructure.storage import MemoryStorage
from todolists.interfaces.api import create_app

from conftest import NOW


@pytest.fixture
def client(tmp_path):
    repo = Repository(MemoryStorage(), clock=lambda: NOW)
    app = create_app(repo, AppConfig(data_path=tmp_path / "unused.json"))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def seeded(client):
    client.post("/api/list", json={"name": "Home"})
    client.post("/api/list", json={"name": "Work", "colour": {"r": 0, "g": 0, "b": 255}})
    client.post("/api/list/Home", json={"title": "Buy avocados", "all_day": True, "due_by": "2026-06-12T00:00:00"})
    client.post("/api/list/Home", json={"title": "Learn Python"})
    client.post("/api/list/Work", json={"title": "Write report"})
    return client


def test_create_and_list(client):
    response = client.post("/api/list", json={"name": "Home"})
    assert response.status_code == 201
    assert response.json()["list"]["name"] == "Home"
    assert response.json()["list"]["colour"] == {"r": 128, "g": 128, "b": 128}

    response = client.get("/api/list")
    assert response.status_code == 200
    assert response.json() == {"lists": ["Home"], "filtered_lists": []}


def test_duplicate_list_conflicts(client):
    client.post("/api/list", json={"name": "Home"})
    response = client.post("/api/list", json={"name": "Home"})
    assert response.status_code == 409
    assert response.json()["detail"]["code"] == "already_exists"


def test_get_list_with_items(seeded):
    response = seeded.get("/api/list/Home")
    assert response.status_code == 200
    items = response.json()["list"]["items"]
    assert [item["title"] for item in items] == ["Buy avocados", "Learn Python"]
    assert items[0]["due_kind"] == "due_by"


def test_unknown_list_is_404(client):
    response = client.get("/api/list/Nope")
    assert response.status_code == 404
    assert response.json()["detail"]["code"] == "not_found"


def test_add_task_with_both_due_dates_is_400(seeded):
    response = seeded.post(
        "/api/list/Home",
        json={"title": "x", "due_on": "2026-06-11T09:00:00", "due_by": "2026-06-12T09:00:00"},
    )
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "invalid_input"


def test_task_crud(seeded):
    response = seeded.get("/api/items/2")
    assert response.status_code == 200
    assert response.json()["task"]["title"] == "Learn Python"

    response = seeded.patch("/api/items/2", json={"done": True, "list": "Work"})
    assert response.status_code == 200
    task = response.json()["task"]
    assert task["done"] is True and task["list"] == "Work" and task["done_on"] is not None

    assert seeded.delete("/api/items/2").status_code == 204
    assert seeded.get("/api/items/2").status_code == 404


def test_invalid_patch_body_is_400(seeded):
    response = seeded.patch("/api/items/1", json={"due": "2026-06-11T09:00:00"})
    assert response.status_code == 400
    assert response.json()["detail"]["code"] == "invalid_input"


def test_filtered_list_lifecycle(seeded):
    body = {
        "name": "Open work",
        "filter": {
            "operator": "AND",
            "children": [
                {"field": "done", "op": "==", "value": "false"},
                {"field": "list", "op": "in", "value": "Work"},
            ],
        },
    }
    response = seeded.post("/api/filtered", json=body)
    assert response.status_code == 201
    assert response.json() == body

    response = seeded.get("/api/filtered/Open work")
    assert response.status_code == 200
    data = response.json()
    assert data["filtered"] is True
    assert data["list"]["name"] == "Open work"
    assert [item["title"] for item in data["list"]["items"]] == ["Write report"]

    assert seeded.get("/api/list").json()["filtered_lists"] == ["Open work"]
    assert seeded.delete("/api/filtered/Open work").status_code == 204
    assert seeded.get("/api/filtered/Open work").status_code == 404


def test_bad_filter_is_400(client):
    response = client.post(
        "/api/filtered",
        json={"name": "Bad", "filter": {"operator": "AND", "children": [{"operator": "NAND"}]}},
    )
    assert response.status_code == 400
    detail = response.json()["detail"]
    assert detail["code"] == "decode_error"
    assert detail["details"]["path"] == "filter.children[0]"


def test_delete_list(seeded):
    assert seeded.delete("/api/list/Home").status_code == 204
    assert seeded.get("/api/list").json()["lists"] == ["Work"]
    assert seeded.delete("/api/list/Home").status_code == 404


def test_cors_headers(tmp_path):
    repo = Repository(MemoryStorage(), clock=lambda: NOW)
    app = create_app(repo, AppConfig(data_path=tmp_path / "db.json", cors_origins=["http://localhost:5173"]))
    with TestClient(app) as client:
        response = client.get("/api/list", headers={"Origin": "http://localhost:5173"})
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"


def test_app_builds_file_repository_from_config(tmp_path):
    app = create_app(config=AppConfig(data_path=tmp_path / "db.json"))
    with TestClient(app) as client:
        assert client.post("/api/list", json={"name": "Home"}).status_code == 201
    assert (tmp_path / "db.json").exists()
