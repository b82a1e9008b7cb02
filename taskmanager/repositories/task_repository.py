"""Task store: project-scoped lookups, filtered paging and persistence."""

from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from taskmanager.core.database import commit_or_rollback
from taskmanager.models.task import ProjectTask
from taskmanager.repositories.filters import LIKE_ESCAPE, clean_search, contains_pattern, offset_for


def get_scoped(db: Session, task_id: int, project_id: int) -> Optional[ProjectTask]:
    return db.query(ProjectTask).filter(
        ProjectTask.id == task_id,
        ProjectTask.project_id == project_id,
    ).first()


def list_for_project(
    db: Session,
    project_id: int,
    page: int,
    page_size: int,
    search: Optional[str] = None,
    is_completed: Optional[bool] = None,
) -> Tuple[List[ProjectTask], int]:
    query = db.query(ProjectTask).filter(ProjectTask.project_id == project_id)

    search = clean_search(search)
    if search:
        pattern = contains_pattern(search)
        query = query.filter(or_(
            ProjectTask.title.ilike(pattern, escape=LIKE_ESCAPE),
            ProjectTask.description.ilike(pattern, escape=LIKE_ESCAPE),
        ))

    if is_completed is not None:
        query = query.filter(ProjectTask.is_completed == is_completed)

    total = query.count()
    offset = offset_for(page, page_size)
    if offset >= total:
        return [], total

    tasks = (
        query.order_by(ProjectTask.created_at.desc(), ProjectTask.id.desc())
        .offset(offset)
        .limit(page_size)
        .all()
    )
    return tasks, total


def add(db: Session, task: ProjectTask) -> ProjectTask:
    db.add(task)
    commit_or_rollback(db)
    db.refresh(task)
    return task


def save(db: Session, task: ProjectTask) -> ProjectTask:
    commit_or_rollback(db)
    db.refresh(task)
    return task


def delete(db: Session, task: ProjectTask) -> None:
    db.delete(task)
    commit_or_rollback(db)
