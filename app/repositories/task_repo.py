"""Repo de la colección `tasks` (tablero kanban).

- Las tareas nuevas se agregan al final (orden de inserción).
- Defaults: `description=""`, `status="todo"`.
"""
import logging
from typing import Dict, Any, List, Optional

from app.infrastructure.storage.json_store import get_store

COLLECTION = "tasks"

# Orden de columnas del tablero
STATUSES = ("todo", "in_progress", "done")

_log = logging.getLogger("kanban.store")


def list_tasks(status: Optional[str] = None) -> List[Dict[str, Any]]:
    """Lista tareas en orden de inserción, opcionalmente filtradas por estado.

    Registros con un estado fuera del tablero (archivo editado a mano o
    heredado) se omiten con un warning en lugar de romper el listado.
    """
    items = []
    for t in get_store(COLLECTION).list():
        if t.get("status") not in STATUSES:
            _log.warning("Skipping task id=%s with unknown status=%r", t.get("id"), t.get("status"))
            continue
        items.append(t)
    if status:
        items = [t for t in items if t.get("status") == status]
    return items


def get_task(task_id: str) -> Dict[str, Any]:
    return get_store(COLLECTION).get(task_id)


def insert_task(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Inserta tarea con defaults y devuelve el registro completo."""
    data = dict(doc)
    if data.get("description") is None:
        data["description"] = ""
    data.setdefault("status", "todo")
    return get_store(COLLECTION).create(data)


def update_task(task_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
    """Actualiza sólo `title`/`description` presentes en `updates`."""
    set_ops = {k: updates[k] for k in ("title", "description") if k in updates}
    return get_store(COLLECTION).update_fields(task_id, set_ops)


def set_task_status(task_id: str, status: str) -> Dict[str, Any]:
    return get_store(COLLECTION).update_fields(task_id, {"status": status})


def shift_task_status(task_id: str, step: int) -> Dict[str, Any]:
    """Corre la tarea `step` columnas, acotado a los extremos del tablero.

    Lectura y escritura ocurren bajo el lock del store; si la tarea ya está
    en el extremo no se escribe.
    """
    def _next_status(task: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        current = task.get("status")
        idx = STATUSES.index(current) if current in STATUSES else 0
        target = STATUSES[max(0, min(len(STATUSES) - 1, idx + step))]
        if target == current:
            return None
        return {"status": target}

    return get_store(COLLECTION).update_with(task_id, _next_status)


def delete_task(task_id: str) -> bool:
    return get_store(COLLECTION).delete(task_id)
