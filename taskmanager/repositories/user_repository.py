from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from taskmanager.core.database import commit_or_rollback
from taskmanager.core.exceptions import DuplicateError
from taskmanager.models.user import User


def get_by_id(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email.lower()).first()


def email_exists(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email.lower()).first() is not None


def add(db: Session, user: User) -> User:
    db.add(user)
    try:
        commit_or_rollback(db)
    except IntegrityError as exc:
        # inscription concurrente avec le même email
        raise DuplicateError("Email already registered") from exc
    db.refresh(user)
    return user
