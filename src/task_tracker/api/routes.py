# src/task_tracker/api/routes.py

"""
/tasks endpoints.

Each handler does exactly one storage call and maps absence to
TaskNotFoundError; rendering of errors lives in app.py.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from ..core.ports import TaskRepo
from ..errors import TaskNotFoundError
from .schemas import DeleteResult, TaskCreate, TaskOut, TaskUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_task_store(request: Request) -> TaskRepo:
    return request.app.state.app_state.task_store


@router.post("", status_code=201, response_model=TaskOut)
def create_task(body: TaskCreate, store: TaskRepo = Depends(get_task_store)) -> TaskOut:
    task = store.insert(body.title)
    logger.info("Created task id=%s", task.id)
    return TaskOut.model_validate(task)


@router.get("", response_model=list[TaskOut])
def list_tasks(store: TaskRepo = Depends(get_task_store)) -> list[TaskOut]:
    return [TaskOut.model_validate(t) for t in store.select_all()]


# Ids are taken as strings; the store decides what resolves.
@router.get("/{task_id}", response_model=TaskOut)
def get_task(task_id: str, store: TaskRepo = Depends(get_task_store)) -> TaskOut:
    task = store.select_by_id(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return TaskOut.model_validate(task)


@router.put("/{task_id}", response_model=TaskOut)
def update_task(task_id: str, body: TaskUpdate, store: TaskRepo = Depends(get_task_store)) -> TaskOut:
    changes = body.changes()
    task = store.update(task_id, changes)
    if task is None:
        raise TaskNotFoundError(task_id)
    logger.info("Updated task id=%s fields=%s", task.id, sorted(changes))
    return TaskOut.model_validate(task)


@router.delete("/{task_id}", response_model=DeleteResult)
def delete_task(task_id: str, store: TaskRepo = Depends(get_task_store)) -> DeleteResult:
    if not store.delete_by_id(task_id):
        raise TaskNotFoundError(task_id)
    logger.info("Deleted task id=%s", task_id)
    return DeleteResult(deleted=True)
