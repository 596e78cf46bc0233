"""
Sellos de tiempo ISO-8601 UTC para los registros.

Formato fijo con milisegundos y sufijo `Z` (igual que `Date.toISOString()`),
p.ej. `2026-10-19T12:00:00.123Z`; el orden lexicográfico coincide con el
cronológico.
"""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

_TICK = timedelta(milliseconds=1)


def format_iso(dt: datetime) -> str:
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: Optional[str]) -> Optional[datetime]:
    """Convierte un sello ISO-8601 a datetime UTC; None si no se puede."""
    if not value:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def now_iso() -> str:
    return format_iso(datetime.now(timezone.utc))


def next_timestamp(previous: Optional[str]) -> str:
    """Sello "ahora" estrictamente posterior a `previous`.

    Si el reloj no avanzó (misma resolución de ms o reloj atrasado) devuelve
    `previous + 1ms`.
    """
    now = datetime.now(timezone.utc)
    now = now.replace(microsecond=now.microsecond // 1000 * 1000)
    prev = parse_iso(previous)
    if prev is not None and now <= prev:
        now = prev + _TICK
    return format_iso(now)
