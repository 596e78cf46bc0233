"""
Esquemas Pydantic para `task` (tablero kanban).

Convenciones:
- Atributos en snake_case; en el cable y en disco se usan camelCase.
- Timestamps ISO-8601 UTC sellados en el store.
"""
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from app.api.schemas.common import CamelModel


TaskStatus = Literal["todo", "in_progress", "done"]


class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None


class TaskUpdate(BaseModel):
    """Patch parcial: sólo se aplican los campos enviados."""
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None


class TaskStatusUpdate(BaseModel):
    status: TaskStatus


class TaskMove(BaseModel):
    direction: Literal["left", "right"]


class TaskOut(CamelModel):
    id: str
    title: str
    description: str
    status: TaskStatus
    created_at: str
    updated_at: str


class TaskBoardOut(BaseModel):
    todo: List[TaskOut]
    in_progress: List[TaskOut]
    done: List[TaskOut]
