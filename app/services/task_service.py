"""
Service layer for tasks: thin wrappers over the repository plus board helpers.
"""
from typing import Dict, Any, List, Literal, Optional

from app.repositories.task_repo import (
    STATUSES,
    list_tasks as _list_tasks,
    get_task as _get_task,
    insert_task as _insert_task,
    update_task as _update_task,
    set_task_status as _set_task_status,
    shift_task_status as _shift_task_status,
    delete_task as _delete_task,
)


def list_tasks(status: Optional[str] = None) -> List[Dict[str, Any]]:
    return _list_tasks(status=status)


def get_task(task_id: str) -> Dict[str, Any]:
    return _get_task(task_id)


def insert_task(doc: Dict[str, Any]) -> Dict[str, Any]:
    return _insert_task(doc)


def update_task(task_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
    return _update_task(task_id, updates)


def update_task_status(task_id: str, status: str) -> Dict[str, Any]:
    return _set_task_status(task_id, status)


def delete_task(task_id: str) -> bool:
    return _delete_task(task_id)


def get_board() -> Dict[str, List[Dict[str, Any]]]:
    """Agrupa las tareas por columna, respetando el orden de inserción."""
    board: Dict[str, List[Dict[str, Any]]] = {s: [] for s in STATUSES}
    for t in _list_tasks():
        board[t["status"]].append(t)
    return board


def move_task(task_id: str, direction: Literal["left", "right"]) -> Dict[str, Any]:
    """Mueve la tarea una columna a la izquierda/derecha, acotado a los extremos.

    Si ya está en el extremo no escribe y devuelve la tarea sin cambios.
    """
    return _shift_task_status(task_id, -1 if direction == "left" else 1)
