# tests/test_notes_api.py

from __future__ import annotations

API = "/api"


def _create(client, **payload):
    r = client.post(f"{API}/notes", json=payload)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_defaults(client):
    note = _create(client, title="Hello")
    assert note["content"] == ""
    assert note["tags"] == []
    assert note["createdAt"] == note["updatedAt"]
    assert note["id"].startswith("note_")


def test_notes_are_listed_newest_first(client):
    a = _create(client, title="a")
    b = _create(client, title="b")
    assert [n["id"] for n in client.get(f"{API}/notes").json()] == [b["id"], a["id"]]


def test_tags_are_distinct_and_sorted(client):
    _create(client, title="one", tags=["a", "b"])
    _create(client, title="two", tags=["b", "c"])
    assert client.get(f"{API}/notes/tags").json() == ["a", "b", "c"]


def test_tags_are_stored_as_given(client):
    note = _create(client, title="dup", tags=["x", "x"])
    assert note["tags"] == ["x", "x"]


def test_get_unknown_note_is_404(client):
    r = client.get(f"{API}/notes/note_0123456789abcdef")
    assert r.status_code == 404
    assert r.json()["message"] == "Nota no encontrada"


def test_update_merges_fields(client):
    note = _create(client, title="t", content="body", tags=["a"])
    r = client.patch(f"{API}/notes/{note['id']}", json={"tags": ["z"]})
    assert r.status_code == 200
    body = r.json()
    assert body["tags"] == ["z"]
    assert body["content"] == "body"
    assert body["title"] == "t"
    assert body["updatedAt"] > note["updatedAt"]


def test_update_unknown_note_is_404(client):
    r = client.patch(f"{API}/notes/note_missing", json={"title": "x"})
    assert r.status_code == 404


def test_search_matches_title_content_and_tags(client):
    a = _create(client, title="Groceries", content="milk")
    b = _create(client, title="Ideas", content="Buy MILK later")
    c = _create(client, title="Work", tags=["Urgent"])

    ids = lambda q: {n["id"] for n in client.get(f"{API}/notes", params={"q": q}).json()}
    assert ids("milk") == {a["id"], b["id"]}
    assert ids("urg") == {c["id"]}
    assert ids("grocer") == {a["id"]}
    assert ids("   ") == {a["id"], b["id"], c["id"]}
    assert ids("nothing") == set()


def test_delete_is_idempotent(client):
    note = _create(client, title="t")
    for _ in range(2):
        assert client.delete(f"{API}/notes/{note['id']}").json() == {"success": True}
    assert client.get(f"{API}/notes/{note['id']}").status_code == 404


def test_notes_survive_restart(client, data_dir):
    from app.infrastructure.storage.json_store import reset_stores

    _create(client, title="persist me", tags=["keep"])
    before = client.get(f"{API}/notes").json()

    reset_stores()
    assert client.get(f"{API}/notes").json() == before


def test_search_keeps_surrounding_spaces(client):
    a = _create(client, title="Groceries", content="buy milk")
    b = _create(client, title="Ideas", content="milk later")

    found = {n["id"] for n in client.get(f"{API}/notes", params={"q": "milk "}).json()}
    assert found == {b["id"]}
    assert a["id"] not in found
