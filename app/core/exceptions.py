"""
Errores de dominio y handlers globales para respuestas de error consistentes.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class StoreError(Exception):
    """Base de los errores que levanta la capa de almacenamiento."""


class RecordNotFound(StoreError):
    """El id pedido no existe en el store."""

    def __init__(self, collection: str, record_id: str) -> None:
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"{collection}: registro no encontrado ({record_id})")


class StorageUnavailable(StoreError):
    """Fallo de E/S al leer o escribir el documento de un store."""

    def __init__(self, collection: str, reason: str) -> None:
        self.collection = collection
        self.reason = reason
        super().__init__(f"{collection}: almacenamiento no disponible ({reason})")


# Mensajes públicos por colección (no exponen rutas ni ids internos)
_NOT_FOUND_MESSAGES = {
    "tasks": "Tarea no encontrada",
    "notes": "Nota no encontrada",
}


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _body(request: Request, **fields: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = dict(fields)
    rid = _req_id(request)
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("kanban.errors")

    @app.exception_handler(RecordNotFound)
    async def _not_found_handler(request: Request, exc: RecordNotFound):
        message = _NOT_FOUND_MESSAGES.get(exc.collection, "Registro no encontrado")
        return JSONResponse(status_code=404, content=_body(request, message=message))

    @app.exception_handler(StorageUnavailable)
    async def _storage_handler(request: Request, exc: StorageUnavailable):
        log.error("Storage unavailable collection=%s reason=%s request_id=%s", exc.collection, exc.reason, _req_id(request))
        return JSONResponse(status_code=503, content=_body(request, message="Almacenamiento no disponible"))

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content=_body(request, message=exc.detail or "HTTP error"))

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=422,
            content=_body(request, message="Validation error", errors=jsonable_encoder(exc.errors())),
        )

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        rid = _req_id(request)
        log.exception("Unhandled error request_id=%s", rid)
        return JSONResponse(status_code=500, content=_body(request, message="Internal server error"))
