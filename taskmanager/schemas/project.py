"""Pydantic schemas for project request/response validation."""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from taskmanager.schemas.base import CamelModel, as_utc
from taskmanager.schemas.task import TaskResponse


class ProjectCreate(CamelModel):
    title: str
    description: Optional[str] = None


class ProjectUpdate(ProjectCreate):
    pass


class ProjectResponse(CamelModel):
    id: int
    title: str
    description: Optional[str]
    created_at: datetime
    total_tasks: int
    completed_tasks: int
    progress_percentage: float

    @field_validator("created_at")
    @classmethod
    def created_at_in_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class ProjectDetailResponse(ProjectResponse):
    tasks: List[TaskResponse] = []


class ProjectProgressResponse(CamelModel):
    project_id: int
    project_title: str
    total_tasks: int
    completed_tasks: int
    progress_percentage: float
