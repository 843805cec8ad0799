# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings
from .ports import TaskRepo


@dataclass
class AppState:
    # Settings are kept on the state so the app factory never reads globals.
    settings: Settings
    task_store: TaskRepo
