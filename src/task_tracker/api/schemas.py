# src/task_tracker/api/schemas.py

"""Request / response models for the /tasks endpoints."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, StrictBool, StringConstraints, model_validator

from ..tasks.task_models import is_blank


def _not_blank(title: str) -> str:
    if is_blank(title):
        raise ValueError("title must not be blank")
    return title


# Stored exactly as sent; whitespace only counts when deciding blankness.
Title = Annotated[str, StringConstraints(min_length=1, max_length=500), AfterValidator(_not_blank)]


class TaskCreate(BaseModel):
    title: Title


class TaskUpdate(BaseModel):
    """
    Partial update. Only fields present in the body are changed;
    unknown keys (including `id`) are ignored.
    """

    title: Title | None = None
    completed: StrictBool | None = None

    @model_validator(mode="after")
    def _no_explicit_nulls(self) -> "TaskUpdate":
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f"{name} must not be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | str
    title: str
    completed: bool
    created_at: float
    updated_at: float


class DeleteResult(BaseModel):
    deleted: bool


class Health(BaseModel):
    status: str
    tasks: int
