"""
Endpoints para `note`.
"""
from typing import List, Optional

from fastapi import APIRouter, Query, status

from app.api.schemas.common import DeleteOut
from app.api.schemas.note import NoteCreate, NoteOut, NoteUpdate
from app.services.note_service import (
    delete_note,
    get_note,
    insert_note,
    list_notes,
    list_tags,
    update_note,
)


router = APIRouter(prefix="/notes", tags=["Notes"])


@router.get(
    "",
    response_model=List[NoteOut],
    summary="Listar notas",
    description="Lista notas (más recientes primero); `q` busca en título, contenido y tags.",
)
def get_notes(q: Optional[str] = Query(default=None)):
    return list_notes(q=q)


@router.get("/tags", response_model=List[str], summary="Tags distintos (ordenados)")
def get_note_tags():
    return list_tags()


@router.get("/{note_id}", response_model=NoteOut, summary="Obtener nota")
def get_note_by_id(note_id: str):
    return get_note(note_id)


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=NoteOut,
    summary="Crear nota",
)
def create_note(payload: NoteCreate):
    return insert_note(payload.model_dump())


@router.patch("/{note_id}", response_model=NoteOut, summary="Editar nota")
def patch_note(note_id: str, payload: NoteUpdate):
    return update_note(note_id, payload.model_dump(exclude_unset=True, exclude_none=True))


@router.delete("/{note_id}", response_model=DeleteOut, summary="Borrar nota (idempotente)")
def remove_note(note_id: str):
    return DeleteOut(success=delete_note(note_id))
