# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

TaskId = int | str

# Columns a client may change after creation.
MUTABLE_FIELDS = ("title", "completed")

# Largest value an SQLite INTEGER PRIMARY KEY can hold.
MAX_TASK_ID = 2**63 - 1


@dataclass(frozen=True, slots=True)
class Task:
    id: TaskId
    title: str
    completed: bool
    created_at: float
    updated_at: float


def parse_task_id(task_id: TaskId) -> int | None:
    """
    Turn a client-supplied id into a storable integer.

    Returns None for anything that can never name a stored task:
    bools, non-ASCII or non-digit strings, and values outside 1..MAX_TASK_ID.
    """
    if isinstance(task_id, bool):
        return None
    if isinstance(task_id, int):
        n = task_id
    else:
        s = str(task_id).strip()
        if not (s.isascii() and s.isdigit()):
            return None
        n = int(s)
    if not 0 < n <= MAX_TASK_ID:
        return None
    return n


def is_blank(title: str) -> bool:
    return not title or not title.strip()
