# tests/conftest.py

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from task_tracker.api.app import create_app
from task_tracker.config import Settings
from task_tracker.core.state import AppState
from task_tracker.tasks.memory_store import InMemoryTaskStore
from task_tracker.tasks.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at a per-test directory.

    Built directly rather than from the environment,
    to keep tests isolated and deterministic.
    """
    return Settings(
        app_name="task-tracker-test",
        log_level="DEBUG",
        log_to_file=False,
        host="127.0.0.1",
        port=0,
        storage_backend="sqlite",
        data_dir=tmp_path,
        tasks_db_path=tmp_path / "todo.db",
    )


@pytest.fixture(params=["sqlite", "memory"])
def store(request: pytest.FixtureRequest, settings: Settings):
    """Both TaskRepo implementations, so the contract is checked against each."""
    if request.param == "sqlite":
        s = TaskStore(settings.tasks_db_path)
    else:
        s = InMemoryTaskStore()
    s.open()
    yield s
    s.close()


@pytest.fixture()
def state(settings: Settings, store) -> AppState:
    return AppState(settings=settings, task_store=store)


@pytest.fixture()
def client(state: AppState) -> Iterator[TestClient]:
    # Entering the client runs the app lifespan (store open/close).
    with TestClient(create_app(state)) as c:
        yield c
