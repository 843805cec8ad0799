# src/task_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the HTTP layer.

Routes depend on the TaskRepo Protocol instead of a concrete store,
so the SQLite store and the in-memory store are interchangeable.
"""

from typing import Any, Protocol

from ..tasks.task_models import Task, TaskId


class TaskRepo(Protocol):
    # Lifecycle
    def open(self) -> None: ...
    def close(self) -> None: ...
    def reset(self) -> None: ...

    # CRUD
    def insert(self, title: str) -> Task: ...
    def select_all(self) -> list[Task]: ...
    def select_by_id(self, task_id: TaskId) -> Task | None: ...
    def update(self, task_id: TaskId, fields: dict[str, Any]) -> Task | None: ...
    def delete_by_id(self, task_id: TaskId) -> bool: ...

    def count_tasks(self) -> int: ...
