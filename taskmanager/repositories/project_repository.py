"""Project store: user-scoped lookups, filtered paging and persistence."""

from typing import List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from taskmanager.core.database import commit_or_rollback
from taskmanager.models.project import Project
from taskmanager.repositories.filters import LIKE_ESCAPE, clean_search, contains_pattern, offset_for


def get_scoped(db: Session, project_id: int, user_id: int) -> Optional[Project]:
    """Load a project with its tasks, only if ``user_id`` owns it."""
    return (
        db.query(Project)
        .options(selectinload(Project.tasks))
        .filter(Project.id == project_id, Project.user_id == user_id)
        .first()
    )


def list_for_user(
    db: Session,
    user_id: int,
    page: int,
    page_size: int,
    search: Optional[str] = None,
) -> Tuple[List[Project], int]:
    query = db.query(Project).filter(Project.user_id == user_id)

    search = clean_search(search)
    if search:
        pattern = contains_pattern(search)
        query = query.filter(or_(
            Project.title.ilike(pattern, escape=LIKE_ESCAPE),
            Project.description.ilike(pattern, escape=LIKE_ESCAPE),
        ))

    # total calculé avant la pagination
    total = query.count()
    offset = offset_for(page, page_size)
    if offset >= total:
        # au-delà de la dernière page : rien à lire
        return [], total

    projects = (
        query.options(selectinload(Project.tasks))
        .order_by(Project.created_at.desc(), Project.id.desc())
        .offset(offset)
        .limit(page_size)
        .all()
    )
    return projects, total


def add(db: Session, project: Project) -> Project:
    db.add(project)
    commit_or_rollback(db)
    db.refresh(project)
    return project


def save(db: Session, project: Project) -> Project:
    commit_or_rollback(db)
    db.refresh(project)
    return project


def delete(db: Session, project: Project) -> None:
    # le cascade ORM supprime les tâches dans la même transaction
    db.delete(project)
    commit_or_rollback(db)
