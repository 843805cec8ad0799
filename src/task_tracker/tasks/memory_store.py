# src/task_tracker/tasks/memory_store.py

from __future__ import annotations

import itertools
import logging
import threading
import time
from dataclasses import replace
from typing import Any

from .task_models import Task, TaskId, is_blank, parse_task_id

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """
    Process-local TaskRepo.

    Same contract as the SQLite TaskStore, without a file: used by the
    `memory` storage backend and by tests that want full isolation.
    A lock stands in for SQLite's per-row atomicity.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[int, Task] = {}
        self._ids = itertools.count(1)

    def open(self) -> None:
        logger.info("InMemoryTaskStore ready total=%s", self.count_tasks())

    def close(self) -> None:
        return

    def reset(self) -> None:
        with self._lock:
            self._tasks.clear()
            self._ids = itertools.count(1)

    def count_tasks(self) -> int:
        with self._lock:
            return len(self._tasks)

    def insert(self, title: str) -> Task:
        if is_blank(title):
            raise ValueError("title is required")
        now = time.time()
        with self._lock:
            task = Task(id=next(self._ids), title=title, completed=False, created_at=now, updated_at=now)
            self._tasks[task.id] = task
        return task

    def select_all(self) -> list[Task]:
        with self._lock:
            return sorted(self._tasks.values(), key=lambda t: t.id)

    def select_by_id(self, task_id: TaskId) -> Task | None:
        key = parse_task_id(task_id)
        with self._lock:
            return self._tasks.get(key) if key is not None else None

    def update(self, task_id: TaskId, fields: dict[str, Any]) -> Task | None:
        key = parse_task_id(task_id)
        if key is None:
            return None

        changes: dict[str, Any] = {}
        if "title" in fields:
            title = str(fields["title"])
            if is_blank(title):
                raise ValueError("title must not be empty")
            changes["title"] = title
        if "completed" in fields:
            changes["completed"] = bool(fields["completed"])

        with self._lock:
            task = self._tasks.get(key)
            if task is None:
                return None
            if not changes:
                return task
            task = replace(task, **changes, updated_at=time.time())
            self._tasks[key] = task
            return task

    def delete_by_id(self, task_id: TaskId) -> bool:
        key = parse_task_id(task_id)
        if key is None:
            return False
        with self._lock:
            return self._tasks.pop(key, None) is not None
