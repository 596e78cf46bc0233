# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.infrastructure.storage.json_store import JsonRecordStore, reset_stores


@pytest.fixture()
def data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Points both stores at a per-test directory.

    The store registry caches handles built from settings, so it is reset
    before and after each test.
    """
    monkeypatch.setattr(settings, "data_dir", str(tmp_path))
    reset_stores()
    yield tmp_path
    reset_stores()


@pytest.fixture()
def client(data_dir: Path) -> TestClient:
    from app.main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture()
def task_store(tmp_path: Path) -> JsonRecordStore:
    return JsonRecordStore(tmp_path / "kanban-data.json", "tasks", "task")


@pytest.fixture()
def note_store(tmp_path: Path) -> JsonRecordStore:
    return JsonRecordStore(tmp_path / "notes-data.json", "notes", "note", prepend=True)
