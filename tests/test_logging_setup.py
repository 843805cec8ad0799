# tests/test_logging_setup.py

from __future__ import annotations

import logging

from task_tracker.logging_setup import _ConsoleNoiseFilter


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_own_logs_and_quiets_third_party() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("task_tracker.tasks.task_store", logging.DEBUG))
    assert f.filter(_record("uvicorn.access", logging.INFO))
    assert not f.filter(_record("uvicorn.error", logging.DEBUG))
    assert not f.filter(_record("httpx", logging.INFO))
    assert f.filter(_record("httpx", logging.WARNING))
    assert not f.filter(_record("py.warnings", logging.WARNING))
