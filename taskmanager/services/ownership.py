import logging

from sqlalchemy.orm import Session

from taskmanager.core.exceptions import NotFoundError
from taskmanager.models.project import Project
from taskmanager.repositories import project_repository

logger = logging.getLogger(__name__)


def get_owned_project(db: Session, project_id: int, user_id: int) -> Project:
    """Load ``project_id`` scoped to its owner or raise NotFoundError.

    A project owned by someone else is reported exactly like a missing one.
    Called at the top of every project and task operation, nothing is cached
    between calls.
    """
    project = project_repository.get_scoped(db, project_id, user_id)
    if project is None:
        logger.debug("Project %s not found for user %s", project_id, user_id)
        raise NotFoundError("Project", project_id)
    return project
