"""Health (sin auth), salidas tipadas y estables."""
from fastapi import APIRouter, status

from app.api.schemas.health import PingOut, HealthOut
from app.infrastructure.storage.json_store import get_store


router = APIRouter(tags=["Health"])  # no prefix to keep paths stable


@router.get("/ping", response_model=PingOut, summary="Ping básico")
def ping() -> PingOut:
    return PingOut(message="pong")


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthOut, summary="Salud y conteo por store")
def health() -> HealthOut:
    stores = {name: get_store(name).count() for name in ("tasks", "notes")}
    return HealthOut(ok=True, stores=stores)
