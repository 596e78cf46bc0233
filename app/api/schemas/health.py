"""Schemas para endpoints de health."""
from typing import Dict
from pydantic import BaseModel


class PingOut(BaseModel):
    message: str


class HealthOut(BaseModel):
    ok: bool
    stores: Dict[str, int]
