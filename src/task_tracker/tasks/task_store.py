# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
import time
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from ..errors import StorageError
from .task_models import MUTABLE_FIELDS, Task, TaskId, is_blank, parse_task_id

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    completed INTEGER NOT NULL DEFAULT 0 CHECK (completed IN (0, 1)),
    created_at REAL NOT NULL,
    updated_at REAL NOT NULL
)
"""


class TaskStore:
    """
    SQLite task store.

    Thread-safety:
    - each method opens its own SQLite connection
    - single-row writes are serialized by SQLite itself

    The schema is ensured on every connection, so the database file may be
    deleted at any time and is recreated empty on next access.
    """

    def __init__(self, db_path: str | Path = "data/todo.db") -> None:
        self._db_path = Path(db_path)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def open(self) -> None:
        with self._connect():
            pass
        logger.info("TaskStore ready db=%s total=%s", self._db_path, self.count_tasks())

    def close(self) -> None:
        """Shutdown hook (no persistent connections to close)."""
        logger.debug("TaskStore closed db=%s", self._db_path)

    def reset(self) -> None:
        """Remove the backing file. Test contexts only."""
        for suffix in ("", "-wal", "-shm"):
            with contextlib.suppress(FileNotFoundError):
                Path(f"{self._db_path}{suffix}").unlink()
        logger.info("TaskStore reset db=%s", self._db_path)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        conn.execute(_SCHEMA)
        conn.commit()
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    @contextlib.contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        conn: sqlite3.Connection | None = None
        try:
            conn = self._get_conn()
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            if conn is not None:
                with contextlib.suppress(sqlite3.Error):
                    conn.rollback()
            raise StorageError(f"sqlite failure on {self._db_path}: {exc}") from exc
        finally:
            if conn is not None:
                conn.close()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"]),
            completed=bool(row["completed"]),
            created_at=float(row["created_at"] or 0.0),
            updated_at=float(row["updated_at"] or 0.0),
        )

    @staticmethod
    def _select(conn: sqlite3.Connection, task_id: int) -> Task | None:
        row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
        return TaskStore._row_to_task(row) if row else None

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._connect() as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)

    def insert(self, title: str) -> Task:
        if is_blank(title):
            raise ValueError("title is required")

        now = time.time()
        with self._connect() as conn:
            cur = conn.execute(
                "INSERT INTO tasks(title, completed, created_at, updated_at) VALUES (?, 0, ?, ?)",
                (title, now, now),
            )
            rowid = cur.lastrowid
            if rowid is None:
                raise StorageError("SQLite did not return lastrowid for tasks insert")
            logger.debug("Task added id=%s", rowid)
            return Task(id=int(rowid), title=title, completed=False, created_at=now, updated_at=now)

    def select_all(self) -> list[Task]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM tasks ORDER BY id ASC").fetchall()
            return [self._row_to_task(r) for r in rows]

    def select_by_id(self, task_id: TaskId) -> Task | None:
        tid = parse_task_id(task_id)
        if tid is None:
            return None
        with self._connect() as conn:
            return self._select(conn, tid)

    def update(self, task_id: TaskId, fields: dict[str, Any]) -> Task | None:
        tid = parse_task_id(task_id)
        if tid is None:
            return None

        sets: list[str] = []
        params: list[Any] = []

        if "title" in fields:
            title = str(fields["title"])
            if is_blank(title):
                raise ValueError("title must not be empty")
            sets.append("title = ?")
            params.append(title)

        if "completed" in fields:
            sets.append("completed = ?")
            params.append(1 if fields["completed"] else 0)

        ignored = set(fields) - set(MUTABLE_FIELDS)
        if ignored:
            logger.debug("Task update id=%s ignoring fields=%s", tid, sorted(ignored))

        with self._connect() as conn:
            if not sets:
                return self._select(conn, tid)

            sets.append("updated_at = ?")
            params.append(time.time())
            params.append(tid)

            cur = conn.execute(f"UPDATE tasks SET {', '.join(sets)} WHERE id = ?", params)
            if cur.rowcount == 0:
                return None
            logger.debug("Task updated id=%s", tid)
            return self._select(conn, tid)

    def delete_by_id(self, task_id: TaskId) -> bool:
        tid = parse_task_id(task_id)
        if tid is None:
            return False
        with self._connect() as conn:
            cur = conn.execute("DELETE FROM tasks WHERE id = ?", (tid,))
            deleted = cur.rowcount == 1
            if deleted:
                logger.debug("Task deleted id=%s", tid)
            return deleted
