# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the configured task store into AppState.
"""

from __future__ import annotations

import logging

from ..config import STORAGE_BACKENDS, Settings, get_settings
from ..core.ports import TaskRepo
from ..core.state import AppState
from ..tasks.memory_store import InMemoryTaskStore
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings: Settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    if settings.storage_backend == "sqlite":
        settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def build_task_store(settings: Settings) -> TaskRepo:
    backend = settings.storage_backend
    if backend == "sqlite":
        return TaskStore(settings.tasks_db_path)
    if backend == "memory":
        logger.warning("Using in-memory task store: data is lost on exit.")
        return InMemoryTaskStore()
    raise ValueError(f"Unknown storage backend {backend!r}; expected one of {STORAGE_BACKENDS}")


def create_initial_state(*, settings: Settings | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)
    return AppState(settings=settings, task_store=build_task_store(settings))
