"""
Semilla de datos de demo para el tablero y las notas.

Uso:
  PYTHONPATH=. python scripts/seed_demo_data.py            # dry-run (muestra qué insertaría)
  PYTHONPATH=. python scripts/seed_demo_data.py --yes      # inserta
  PYTHONPATH=. python scripts/seed_demo_data.py --reset --yes

Características:
  - Inserta tareas repartidas en las tres columnas y notas con tags.
  - No duplica: omite registros cuyo título ya exista en el store.
  - --reset vacía ambos stores antes de sembrar.
"""
from __future__ import annotations

import argparse
from typing import Any, Dict, List

from app.core.config import settings
from app.core.logging import setup_logging
from app.infrastructure.storage.json_store import get_store
from app.repositories.note_repo import insert_note, list_notes
from app.repositories.task_repo import insert_task, list_tasks, set_task_status

DEMO_TASKS: List[Dict[str, Any]] = [
    {"title": "Write spec", "description": "Outline the board and notes API", "status": "done"},
    {"title": "Wire the JSON store", "description": "", "status": "in_progress"},
    {"title": "Add tag search", "description": "Filter notes by title, content or tag", "status": "todo"},
    {"title": "Polish the board", "status": "todo"},
]

DEMO_NOTES: List[Dict[str, Any]] = [
    {"title": "Welcome", "content": "Notes are stored newest first.", "tags": ["intro"]},
    {"title": "Kanban flow", "content": "todo → in_progress → done", "tags": ["kanban", "workflow"]},
    {"title": "Storage", "content": "One pretty-printed JSON document per store.", "tags": ["storage", "workflow"]},
]


def seed_tasks(*, apply: bool) -> int:
    existing = {t.get("title") for t in list_tasks()}
    count = 0
    for item in DEMO_TASKS:
        if item["title"] in existing:
            print(f"  = task ya existe: {item['title']}")
            continue
        print(f"  + task [{item['status']}] {item['title']}")
        count += 1
        if not apply:
            continue
        task = insert_task({"title": item["title"], "description": item.get("description")})
        if item["status"] != "todo":
            set_task_status(task["id"], item["status"])
    return count


def seed_notes(*, apply: bool) -> int:
    existing = {n.get("title") for n in list_notes()}
    count = 0
    # Se insertan al revés para que queden en el orden de DEMO_NOTES (prepend)
    for item in reversed(DEMO_NOTES):
        if item["title"] in existing:
            print(f"  = note ya existe: {item['title']}")
            continue
        print(f"  + note {item['title']} tags={item['tags']}")
        count += 1
        if apply:
            insert_note(dict(item))
    return count


def main(argv: List[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Siembra tareas y notas de demo en los stores JSON")
    parser.add_argument("--yes", action="store_true", help="Aplica los cambios (por defecto dry-run)")
    parser.add_argument("--reset", action="store_true", help="Vacía ambos stores antes de sembrar")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)
    print(f"tasks: {settings.tasks_path}")
    print(f"notes: {settings.notes_path}")

    if args.reset:
        if args.yes:
            for name in ("tasks", "notes"):
                removed = get_store(name).clear()
                print(f"  - {name}: {removed} registros eliminados")
        else:
            print("  - (dry-run) se vaciarían ambos stores")

    n_tasks = seed_tasks(apply=args.yes)
    n_notes = seed_notes(apply=args.yes)
    verb = "Insertados" if args.yes else "Se insertarían"
    print(f"{verb}: {n_tasks} tareas, {n_notes} notas")
    if not args.yes:
        print("Dry-run. Usa --yes para aplicar.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
