"""
Endpoints para `task` (tablero kanban).
"""
from typing import List, Optional

from fastapi import APIRouter, Query, status

from app.api.schemas.common import DeleteOut
from app.api.schemas.task import (
    TaskBoardOut,
    TaskCreate,
    TaskMove,
    TaskOut,
    TaskStatus,
    TaskStatusUpdate,
    TaskUpdate,
)
from app.services.task_service import (
    delete_task,
    get_board,
    get_task,
    insert_task,
    list_tasks,
    move_task,
    update_task,
    update_task_status,
)


router = APIRouter(prefix="/tasks", tags=["Tasks"])


@router.get(
    "",
    response_model=List[TaskOut],
    summary="Listar tareas",
    description="Lista las tareas en orden de inserción; `status` filtra por columna.",
)
def get_tasks(status_f: Optional[TaskStatus] = Query(default=None, alias="status")):
    return list_tasks(status=status_f)


@router.get("/board", response_model=TaskBoardOut, summary="Tablero agrupado por estado")
def get_tasks_board():
    return get_board()


@router.get("/{task_id}", response_model=TaskOut, summary="Obtener tarea")
def get_task_by_id(task_id: str):
    return get_task(task_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskOut,
    summary="Crear tarea",
    description="Crea una tarea en la columna `todo`.",
)
def create_task(payload: TaskCreate):
    return insert_task(payload.model_dump())


@router.patch("/{task_id}", response_model=TaskOut, summary="Editar título/descripción")
def patch_task(task_id: str, payload: TaskUpdate):
    return update_task(task_id, payload.model_dump(exclude_unset=True, exclude_none=True))


@router.patch("/{task_id}/status", response_model=TaskOut, summary="Cambiar estado")
def patch_task_status(task_id: str, payload: TaskStatusUpdate):
    return update_task_status(task_id, payload.status)


@router.post(
    "/{task_id}/move",
    response_model=TaskOut,
    summary="Mover de columna",
    description="Mueve la tarea una columna a la izquierda o derecha (acotado a los extremos).",
)
def post_task_move(task_id: str, payload: TaskMove):
    return move_task(task_id, payload.direction)


@router.delete("/{task_id}", response_model=DeleteOut, summary="Borrar tarea (idempotente)")
def remove_task(task_id: str):
    return DeleteOut(success=delete_task(task_id))
