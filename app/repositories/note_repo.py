"""Repo de la colección `notes`.

- Las notas nuevas se insertan al inicio (más recientes primero).
- Defaults: `content=""`, `tags=[]`. Los tags se guardan tal cual llegan.
"""
from typing import Dict, Any, List

from app.infrastructure.storage.json_store import get_store

COLLECTION = "notes"


def list_notes() -> List[Dict[str, Any]]:
    return get_store(COLLECTION).list()


def get_note(note_id: str) -> Dict[str, Any]:
    return get_store(COLLECTION).get(note_id)


def insert_note(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Inserta nota con defaults y devuelve el registro completo."""
    data = dict(doc)
    if data.get("content") is None:
        data["content"] = ""
    if data.get("tags") is None:
        data["tags"] = []
    return get_store(COLLECTION).create(data)


def update_note(note_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
    """Actualiza `title`/`content`/`tags` presentes en `updates` (merge-patch)."""
    set_ops = {k: updates[k] for k in ("title", "content", "tags") if k in updates}
    return get_store(COLLECTION).update_fields(note_id, set_ops)


def delete_note(note_id: str) -> bool:
    return get_store(COLLECTION).delete(note_id)
