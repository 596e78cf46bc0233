"""Entrada principal de la app FastAPI (configura middlewares, excepciones y routers)."""
import logging

from fastapi import FastAPI

from app.api.router import api_router
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.logging import setup_logging
from app.core.middleware import add_middlewares
from app.infrastructure.storage.json_store import get_store

_log = logging.getLogger("kanban.startup")

setup_logging(settings.log_level)
app = FastAPI(title=settings.app_name)

add_middlewares(app)
register_exception_handlers(app)


# Startup
@app.on_event("startup")
def on_startup():
    # Abre ambos stores; un archivo ilegible sólo deja un warning (lecturas degradan a vacío)
    for name in ("tasks", "notes"):
        store = get_store(name)
        _log.info("Store %s path=%s records=%s", name, store.path, store.count())


# Monta routers bajo el prefijo configurado
app.include_router(api_router, prefix=settings.api_prefix_normalized)
