"""
Esquemas Pydantic para `note`.

Los tags se guardan tal cual llegan (sin normalizar ni deduplicar).
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from app.api.schemas.common import CamelModel


class NoteCreate(BaseModel):
    title: str = Field(min_length=1)
    content: Optional[str] = None
    tags: Optional[List[str]] = None


class NoteUpdate(BaseModel):
    """Patch parcial: sólo se aplican los campos enviados."""
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    tags: Optional[List[str]] = None


class NoteOut(CamelModel):
    id: str
    title: str
    content: str
    tags: List[str]
    created_at: str
    updated_at: str
