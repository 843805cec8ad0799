# src/task_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read at import time; `get_settings()` builds and caches on first use.
- Tests build Settings directly (or via `from_env()` with a patched environment).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKS"

STORAGE_BACKENDS = ("sqlite", "memory")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_to_file: bool

    # ---- HTTP ----
    host: str
    port: int

    # ---- Storage ----
    storage_backend: str
    data_dir: Path
    tasks_db_path: Path

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "task-tracker").strip() or "task-tracker"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        host = _env(_k("HOST"), "127.0.0.1").strip() or "127.0.0.1"
        port = _env_int(_k("PORT"), 3000)

        storage_backend = _env(_k("STORAGE"), "sqlite").strip().lower() or "sqlite"

        data_dir = _env_path(_k("DATA_DIR"), Path("data"))
        # The db file lives under data_dir unless pointed elsewhere explicitly.
        tasks_db_path = _env_path(_k("DB_PATH"), data_dir / "todo.db")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            host=host,
            port=port,
            storage_backend=storage_backend,
            data_dir=data_dir,
            tasks_db_path=tasks_db_path,
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
