# src/task_tracker/errors.py

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for errors the HTTP layer knows how to render."""


class TaskNotFoundError(TaskTrackerError):
    def __init__(self, task_id: object) -> None:
        super().__init__(f"task {task_id!r} not found")
        self.task_id = task_id


class StorageError(TaskTrackerError):
    """The storage engine failed (I/O, locked database, corrupt file...)."""
