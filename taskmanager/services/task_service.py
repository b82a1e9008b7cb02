"""Task service.

Every operation first proves that the caller owns the parent project; a
foreign or missing project fails with NotFoundError("Project", ...) before
the task store is queried. Tasks are then looked up by (task id, project id),
so a task living under another project is not found either.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from taskmanager.core.exceptions import NotFoundError
from taskmanager.models.task import ProjectTask
from taskmanager.repositories import task_repository
from taskmanager.schemas.pagination import PagedResponse
from taskmanager.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskmanager.services.ownership import get_owned_project
from taskmanager.services.pagination import build_page, normalize_paging
from taskmanager.services.validation import clean_description, clean_title

logger = logging.getLogger(__name__)


def to_task_response(task: ProjectTask) -> TaskResponse:
    return TaskResponse.model_validate(task)


def _get_task(db: Session, task_id: int, project_id: int) -> ProjectTask:
    task = task_repository.get_scoped(db, task_id, project_id)
    if task is None:
        raise NotFoundError("Task", task_id)
    return task


def list_tasks(
    db: Session,
    project_id: int,
    user_id: int,
    page: Optional[int] = 1,
    page_size: Optional[int] = 10,
    search: Optional[str] = None,
    is_completed: Optional[bool] = None,
) -> PagedResponse:
    get_owned_project(db, project_id, user_id)

    page, page_size = normalize_paging(page, page_size)
    tasks, total = task_repository.list_for_project(
        db, project_id, page, page_size, search=search, is_completed=is_completed
    )
    return build_page(TaskResponse, [to_task_response(t) for t in tasks], total, page, page_size)


def get_task(db: Session, task_id: int, project_id: int, user_id: int) -> TaskResponse:
    get_owned_project(db, project_id, user_id)
    return to_task_response(_get_task(db, task_id, project_id))


def create_task(db: Session, project_id: int, data: TaskCreate, user_id: int) -> TaskResponse:
    get_owned_project(db, project_id, user_id)

    task = ProjectTask(
        project_id=project_id,
        title=clean_title(data.title, "Task"),
        description=clean_description(data.description, "Task"),
        due_date=data.due_date,
        is_completed=False,
        completed_at=None,
    )
    task = task_repository.add(db, task)
    logger.info("Created task %s in project %s", task.id, project_id)
    return to_task_response(task)


def update_task(db: Session, task_id: int, project_id: int, data: TaskUpdate, user_id: int) -> TaskResponse:
    get_owned_project(db, project_id, user_id)
    task = _get_task(db, task_id, project_id)

    title = clean_title(data.title, "Task")
    description = clean_description(data.description, "Task")

    # is_completed / completed_at ne changent que via toggle_task
    task.title = title
    task.description = description
    task.due_date = data.due_date

    task = task_repository.save(db, task)
    logger.info("Updated task %s", task.id)
    return to_task_response(task)


def toggle_task(db: Session, task_id: int, project_id: int, user_id: int) -> TaskResponse:
    get_owned_project(db, project_id, user_id)
    task = _get_task(db, task_id, project_id)

    task.toggle()
    task = task_repository.save(db, task)
    logger.info("Task %s is now %s", task.id, "completed" if task.is_completed else "open")
    return to_task_response(task)


def delete_task(db: Session, task_id: int, project_id: int, user_id: int) -> None:
    get_owned_project(db, project_id, user_id)
    task = _get_task(db, task_id, project_id)

    task_repository.delete(db, task)
    logger.info("Deleted task %s from project %s", task_id, project_id)
