# src/task_tracker/api/app.py

"""
FastAPI application factory.

- keeps the injected AppState on app.state
- opens the task store on startup, closes it on shutdown
- renders the error taxonomy as JSON (400 / 404 / 500)
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.ports import TaskRepo
from ..core.state import AppState
from ..errors import StorageError, TaskNotFoundError
from .routes import get_task_store, router as tasks_router
from .schemas import Health

logger = logging.getLogger(__name__)


def _field_name(loc: tuple) -> str:
    # ("body", "title") -> "title"; ("body",) -> "body"
    parts = [str(p) for p in loc if p != "body"]
    return ".".join(parts) or "body"


async def _on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [
        {"field": _field_name(tuple(err.get("loc", ()))), "message": str(err.get("msg", "invalid"))}
        for err in exc.errors()
    ]
    logger.debug("Validation error %s %s: %s", request.method, request.url.path, details)
    return JSONResponse(status_code=400, content={"error": "validation error", "details": details})


async def _on_not_found(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "not found", "id": str(exc.task_id)})


async def _on_storage_error(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "storage error"})


def create_app(state: AppState) -> FastAPI:
    """Build the HTTP app around an already-constructed AppState."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state.task_store.open()
        try:
            yield
        finally:
            state.task_store.close()

    app = FastAPI(title=state.settings.app_name, version="0.1.0", lifespan=lifespan)
    app.state.app_state = state

    app.add_exception_handler(RequestValidationError, _on_validation_error)
    app.add_exception_handler(TaskNotFoundError, _on_not_found)
    app.add_exception_handler(StorageError, _on_storage_error)

    @app.get("/health", response_model=Health)
    def health(store: TaskRepo = Depends(get_task_store)) -> Health:
        return Health(status="ok", tasks=store.count_tasks())

    app.include_router(tasks_router)
    return app
