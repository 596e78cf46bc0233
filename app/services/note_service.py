"""
Service layer for notes: thin wrappers over repositories, search and tag listing.
"""
from typing import Dict, Any, List, Optional

from app.repositories.note_repo import (
    list_notes as _list_notes,
    get_note as _get_note,
    insert_note as _insert_note,
    update_note as _update_note,
    delete_note as _delete_note,
)


def _matches(note: Dict[str, Any], query: str) -> bool:
    if query in str(note.get("title") or "").lower():
        return True
    if query in str(note.get("content") or "").lower():
        return True
    return any(query in str(t).lower() for t in (note.get("tags") or []))


def list_notes(q: Optional[str] = None) -> List[Dict[str, Any]]:
    """Lista notas (más recientes primero); `q` filtra por título, contenido o tag."""
    items = _list_notes()
    # Sólo se recorta para detectar la búsqueda en blanco; se compara sin recortar
    if not (q or "").strip():
        return items
    query = q.lower()
    return [n for n in items if _matches(n, query)]


def list_tags() -> List[str]:
    """Tags distintos de todas las notas, ordenados."""
    tags = set()
    for n in _list_notes():
        tags.update(n.get("tags") or [])
    return sorted(tags)


def get_note(note_id: str) -> Dict[str, Any]:
    return _get_note(note_id)


def insert_note(doc: Dict[str, Any]) -> Dict[str, Any]:
    return _insert_note(doc)


def update_note(note_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
    return _update_note(note_id, updates)


def delete_note(note_id: str) -> bool:
    return _delete_note(note_id)
