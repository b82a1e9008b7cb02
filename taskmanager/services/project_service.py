"""Project service: ownership checks, validation, progress and mapping."""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from taskmanager.models.project import Project
from taskmanager.repositories import project_repository
from taskmanager.schemas.pagination import PagedResponse
from taskmanager.schemas.project import (
    ProjectCreate,
    ProjectDetailResponse,
    ProjectProgressResponse,
    ProjectResponse,
    ProjectUpdate,
)
from taskmanager.services.ownership import get_owned_project
from taskmanager.services.pagination import build_page, normalize_paging
from taskmanager.services.progress import compute_progress
from taskmanager.services.task_service import to_task_response
from taskmanager.services.validation import clean_description, clean_title

logger = logging.getLogger(__name__)


def to_project_response(project: Project) -> ProjectResponse:
    progress = compute_progress(project.tasks)
    return ProjectResponse(
        id=project.id,
        title=project.title,
        description=project.description,
        created_at=project.created_at,
        total_tasks=progress.total,
        completed_tasks=progress.completed,
        progress_percentage=progress.percentage,
    )


def list_projects(
    db: Session,
    user_id: int,
    page: Optional[int] = 1,
    page_size: Optional[int] = 10,
    search: Optional[str] = None,
) -> PagedResponse:
    page, page_size = normalize_paging(page, page_size)
    projects, total = project_repository.list_for_user(db, user_id, page, page_size, search)
    items = [to_project_response(p) for p in projects]
    return build_page(ProjectResponse, items, total, page, page_size)


def get_project(db: Session, project_id: int, user_id: int) -> ProjectDetailResponse:
    project = get_owned_project(db, project_id, user_id)
    summary = to_project_response(project)

    # tâches les plus récentes d'abord
    tasks = sorted(project.tasks, key=lambda t: (t.created_at, t.id), reverse=True)
    return ProjectDetailResponse(
        **summary.model_dump(),
        tasks=[to_task_response(t) for t in tasks],
    )


def create_project(db: Session, data: ProjectCreate, user_id: int) -> ProjectResponse:
    title = clean_title(data.title, "Project")
    description = clean_description(data.description, "Project")

    project = project_repository.add(db, Project(
        user_id=user_id,
        title=title,
        description=description,
    ))
    logger.info("Created project %s for user %s", project.id, user_id)
    return to_project_response(project)


def update_project(db: Session, project_id: int, data: ProjectUpdate, user_id: int) -> ProjectResponse:
    project = get_owned_project(db, project_id, user_id)

    title = clean_title(data.title, "Project")
    description = clean_description(data.description, "Project")

    # seuls titre et description sont modifiables
    project.title = title
    project.description = description
    project = project_repository.save(db, project)
    logger.info("Updated project %s", project.id)
    return to_project_response(project)


def delete_project(db: Session, project_id: int, user_id: int) -> None:
    project = get_owned_project(db, project_id, user_id)
    task_count = len(project.tasks)
    project_repository.delete(db, project)
    logger.info("Deleted project %s and its %d task(s)", project_id, task_count)


def get_project_progress(db: Session, project_id: int, user_id: int) -> ProjectProgressResponse:
    project = get_owned_project(db, project_id, user_id)
    progress = compute_progress(project.tasks)
    return ProjectProgressResponse(
        project_id=project.id,
        project_title=project.title,
        total_tasks=progress.total,
        completed_tasks=progress.completed,
        progress_percentage=progress.percentage,
    )
