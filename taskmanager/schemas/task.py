"""Pydantic schemas for task request/response validation."""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from taskmanager.schemas.base import CamelModel, as_utc


class TaskCreate(CamelModel):
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class TaskUpdate(TaskCreate):
    """Replaces title, description and due date.

    Completion fields sent by a client are ignored; only the toggle
    endpoint changes them.
    """


class TaskResponse(CamelModel):
    id: int
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    is_completed: bool
    created_at: datetime
    completed_at: Optional[datetime]
    project_id: int

    @field_validator("due_date", "created_at", "completed_at")
    @classmethod
    def timestamps_in_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)
