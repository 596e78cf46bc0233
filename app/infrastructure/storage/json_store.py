"""Store de registros respaldado por un único documento JSON.

Cada store posee un archivo `{"<collection>": [registro, ...]}`. Todas las
operaciones hacen lectura completa → mutación en memoria → reescritura
completa, serializadas por un lock por store (un handle por proceso).

La reescritura es atómica: se escribe a un temporal en el mismo directorio y
se reemplaza con `os.replace`.
"""
from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import uuid
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from app.core.config import settings
from app.core.exceptions import RecordNotFound, StorageUnavailable
from app.core.time import next_timestamp, now_iso

_log = logging.getLogger("kanban.store")

Record = Dict[str, Any]

# Campos que un patch nunca puede tocar
PROTECTED_FIELDS = frozenset({"id", "createdAt", "updatedAt"})


class JsonRecordStore:
    """CRUD sobre una colección homogénea persistida como un documento JSON.

    `prepend=True` inserta los registros nuevos al inicio (orden
    cronológico inverso); si no, se agregan al final (orden de inserción).
    """

    def __init__(self, path: str | Path, collection: str, id_prefix: str, *, prepend: bool = False) -> None:
        self.path = Path(path)
        self.collection = collection
        self.id_prefix = id_prefix
        self.prepend = prepend
        self._lock = threading.RLock()

    # ---- lectura / escritura del documento ----

    def _read(self, *, strict: bool) -> Dict[str, Any]:
        """Lee el documento completo.

        Archivo ausente = documento vacío. Si existe pero no se puede leer o
        no tiene la forma esperada: con `strict` levanta StorageUnavailable
        (para no pisar datos en una mutación); sin `strict` degrada a vacío.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {self.collection: []}
        except OSError as e:
            return self._unreadable(f"read failed: {e}", strict=strict)

        try:
            doc = json.loads(raw)
        except ValueError as e:
            return self._unreadable(f"invalid JSON: {e}", strict=strict)

        if not isinstance(doc, dict):
            return self._unreadable("document is not an object", strict=strict)
        records = doc.setdefault(self.collection, [])
        if not isinstance(records, list):
            return self._unreadable(f"'{self.collection}' is not an array", strict=strict)
        return doc

    def _unreadable(self, reason: str, *, strict: bool) -> Dict[str, Any]:
        if strict:
            raise StorageUnavailable(self.collection, reason)
        _log.warning("Store %s unreadable (%s); serving empty collection path=%s", self.collection, reason, self.path)
        return {self.collection: []}

    def _write(self, doc: Dict[str, Any]) -> None:
        tmp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp_name = fh.name
                json.dump(doc, fh, indent=2, ensure_ascii=False)
                fh.write("\n")
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageUnavailable(self.collection, f"write failed: {e}") from e

    def _new_id(self, records: List[Record]) -> str:
        taken = {r.get("id") for r in records}
        while True:
            candidate = f"{self.id_prefix}_{uuid.uuid4().hex}"
            if candidate not in taken:
                return candidate

    @staticmethod
    def _index_of(records: List[Record], record_id: str) -> int:
        for i, r in enumerate(records):
            if r.get("id") == record_id:
                return i
        return -1

    # ---- operaciones ----

    def list(self) -> List[Record]:
        """Todos los registros en el orden almacenado; nunca falla."""
        with self._lock:
            return self._read(strict=False)[self.collection]

    def count(self) -> int:
        return len(self.list())

    def get(self, record_id: str) -> Record:
        with self._lock:
            records = self._read(strict=False)[self.collection]
            idx = self._index_of(records, record_id)
            if idx == -1:
                raise RecordNotFound(self.collection, record_id)
            return records[idx]

    def create(self, fields: Record) -> Record:
        """Sella id y timestamps, inserta y persiste. Devuelve el registro nuevo."""
        with self._lock:
            doc = self._read(strict=True)
            records = doc[self.collection]
            now = now_iso()
            record: Record = {"id": self._new_id(records)}
            record.update({k: v for k, v in fields.items() if k not in PROTECTED_FIELDS})
            record["createdAt"] = now
            record["updatedAt"] = now
            if self.prepend:
                records.insert(0, record)
            else:
                records.append(record)
            self._write(doc)
            _log.info("Created %s id=%s total=%s", self.collection, record["id"], len(records))
            return record

    def update_fields(self, record_id: str, changes: Record) -> Record:
        """Merge-patch: sólo aplica las claves presentes en `changes`."""
        return self.update_with(record_id, lambda _record: changes, always_touch=True)

    def update_with(
        self,
        record_id: str,
        compute: Callable[[Record], Optional[Record]],
        *,
        always_touch: bool = False,
    ) -> Record:
        """Read-modify-write atómico respecto del lock del store.

        `compute` recibe una copia del registro actual y devuelve el patch a
        aplicar. Un patch vacío o None no escribe (salvo `always_touch`, que
        refresca `updatedAt` igualmente).
        """
        with self._lock:
            doc = self._read(strict=True)
            records = doc[self.collection]
            idx = self._index_of(records, record_id)
            if idx == -1:
                raise RecordNotFound(self.collection, record_id)
            record = records[idx]
            changes = compute(dict(record)) or {}
            if not changes and not always_touch:
                return record
            for key, value in changes.items():
                if key not in PROTECTED_FIELDS:
                    record[key] = value
            record["updatedAt"] = next_timestamp(record.get("updatedAt"))
            self._write(doc)
            _log.debug("Updated %s id=%s fields=%s", self.collection, record_id, sorted(changes))
            return record

    def delete(self, record_id: str) -> bool:
        """Borra si existe. Idempotente: siempre devuelve True."""
        with self._lock:
            doc = self._read(strict=True)
            before = len(doc[self.collection])
            doc[self.collection] = [r for r in doc[self.collection] if r.get("id") != record_id]
            self._write(doc)
            if len(doc[self.collection]) != before:
                _log.info("Deleted %s id=%s", self.collection, record_id)
            return True

    def clear(self) -> int:
        """Vacía la colección; devuelve cuántos registros había.

        Única mutación que no exige un documento legible: es el reset
        explícito (`seed_demo_data.py --reset`) y reemplaza un archivo
        corrupto por uno vacío. El descarte queda en el log.
        """
        with self._lock:
            try:
                doc = self._read(strict=True)
            except StorageUnavailable as e:
                _log.warning("Reset of unreadable store %s discards it: %s", self.collection, e.reason)
                doc = {self.collection: []}
            removed = len(doc[self.collection])
            doc[self.collection] = []
            self._write(doc)
            return removed


# ---- registro de stores (un handle por colección y proceso) ----

_stores: Dict[str, JsonRecordStore] = {}
_registry_lock = threading.Lock()


def _build_store(name: str) -> JsonRecordStore:
    if name == "tasks":
        return JsonRecordStore(settings.tasks_path, "tasks", "task")
    if name == "notes":
        return JsonRecordStore(settings.notes_path, "notes", "note", prepend=True)
    raise KeyError(f"Store desconocido: {name}")


def get_store(name: str) -> JsonRecordStore:
    """Devuelve el store de la colección; lo construye lazy desde settings."""
    with _registry_lock:
        store = _stores.get(name)
        if store is None:
            store = _build_store(name)
            _stores[name] = store
            _log.info("Store listo collection=%s path=%s", name, store.path)
        return store


def reset_stores() -> None:
    """Olvida los handles cacheados (útil en tests o al cambiar settings)."""
    with _registry_lock:
        _stores.clear()
