# tests/test_tasks_api.py

from __future__ import annotations

import json

API = "/api"


def _create(client, **payload):
    r = client.post(f"{API}/tasks", json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def test_list_is_empty_without_data_file(client, data_dir):
    r = client.get(f"{API}/tasks")
    assert r.status_code == 200
    assert r.json() == []
    assert not (data_dir / "kanban-data.json").exists()


def test_create_defaults_and_camel_case_fields(client):
    task = _create(client, title="Write spec")
    assert task["title"] == "Write spec"
    assert task["description"] == ""
    assert task["status"] == "todo"
    assert task["createdAt"] == task["updatedAt"]
    assert set(task) == {"id", "title", "description", "status", "createdAt", "updatedAt"}


def test_status_scenario(client):
    task = _create(client, title="Write spec")

    r = client.patch(f"{API}/tasks/{task['id']}/status", json={"status": "done"})
    assert r.status_code == 200

    fetched = client.get(f"{API}/tasks/{task['id']}").json()
    assert fetched["status"] == "done"
    assert fetched["updatedAt"] > fetched["createdAt"]


def test_create_requires_title(client):
    r = client.post(f"{API}/tasks", json={"description": "no title"})
    assert r.status_code == 422
    assert r.json()["message"] == "Validation error"

    r = client.post(f"{API}/tasks", json={"title": ""})
    assert r.status_code == 422


def test_invalid_status_is_rejected(client):
    task = _create(client, title="t")
    r = client.patch(f"{API}/tasks/{task['id']}/status", json={"status": "blocked"})
    assert r.status_code == 422


def test_patch_only_touches_sent_fields(client):
    task = _create(client, title="t", description="keep")
    r = client.patch(f"{API}/tasks/{task['id']}", json={"title": "renamed"})
    assert r.status_code == 200
    body = r.json()
    assert body["title"] == "renamed"
    assert body["description"] == "keep"
    assert body["status"] == "todo"


def test_unknown_task_is_404(client):
    for method, path, payload in [
        ("get", "/tasks/task_nope", None),
        ("patch", "/tasks/task_nope", {"title": "x"}),
        ("patch", "/tasks/task_nope/status", {"status": "done"}),
        ("post", "/tasks/task_nope/move", {"direction": "right"}),
    ]:
        r = client.request(method.upper(), f"{API}{path}", json=payload)
        assert r.status_code == 404, path
        assert r.json()["message"] == "Tarea no encontrada"
        assert r.json()["request_id"] == r.headers["X-Request-Id"]


def test_delete_is_idempotent(client):
    task = _create(client, title="t")
    for _ in range(2):
        r = client.delete(f"{API}/tasks/{task['id']}")
        assert r.status_code == 200
        assert r.json() == {"success": True}
    assert client.get(f"{API}/tasks/{task['id']}").status_code == 404


def test_move_walks_columns_and_clamps(client):
    task = _create(client, title="t")
    tid = task["id"]

    left = client.post(f"{API}/tasks/{tid}/move", json={"direction": "left"}).json()
    assert left["status"] == "todo"
    assert left["updatedAt"] == task["updatedAt"]

    statuses = [client.post(f"{API}/tasks/{tid}/move", json={"direction": "right"}).json()["status"] for _ in range(3)]
    assert statuses == ["in_progress", "done", "done"]

    back = client.post(f"{API}/tasks/{tid}/move", json={"direction": "left"}).json()
    assert back["status"] == "in_progress"


def test_board_groups_by_status_in_insertion_order(client):
    a = _create(client, title="a")
    b = _create(client, title="b")
    c = _create(client, title="c")
    client.patch(f"{API}/tasks/{b['id']}/status", json={"status": "in_progress"})

    board = client.get(f"{API}/tasks/board").json()
    assert [t["id"] for t in board["todo"]] == [a["id"], c["id"]]
    assert [t["id"] for t in board["in_progress"]] == [b["id"]]
    assert board["done"] == []


def test_status_filter(client):
    _create(client, title="a")
    b = _create(client, title="b")
    client.patch(f"{API}/tasks/{b['id']}/status", json={"status": "done"})

    done = client.get(f"{API}/tasks", params={"status": "done"}).json()
    assert [t["id"] for t in done] == [b["id"]]


def test_persisted_document_layout(client, data_dir):
    task = _create(client, title="t")
    doc = json.loads((data_dir / "kanban-data.json").read_text(encoding="utf-8"))
    assert doc == {"tasks": [task]}


def test_request_id_is_echoed(client):
    r = client.get(f"{API}/tasks", headers={"X-Request-Id": "abc123"})
    assert r.headers["X-Request-Id"] == "abc123"


def test_corrupt_store_write_is_503(client, data_dir):
    (data_dir / "kanban-data.json").write_text("{broken", encoding="utf-8")
    assert client.get(f"{API}/tasks").json() == []
    r = client.post(f"{API}/tasks", json={"title": "t"})
    assert r.status_code == 503
    assert r.json()["message"] == "Almacenamiento no disponible"


def test_legacy_status_does_not_break_listing(client, data_dir):
    task = _create(client, title="t")
    path = data_dir / "kanban-data.json"
    doc = json.loads(path.read_text(encoding="utf-8"))
    doc["tasks"].append({**task, "id": "task_legacy", "status": "archived"})
    path.write_text(json.dumps(doc), encoding="utf-8")

    r = client.get(f"{API}/tasks")
    assert r.status_code == 200
    assert [t["id"] for t in r.json()] == [task["id"]]
    assert client.get(f"{API}/tasks/board").status_code == 200
