import logging
from datetime import datetime, timezone

from sqlalchemy import create_engine, event
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from taskmanager.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: str):
    is_sqlite = url.startswith("sqlite")
    engine = create_engine(
        url,
        echo=False,
        connect_args={"check_same_thread": False} if is_sqlite else {},
    )

    if is_sqlite:
        # SQLite n'applique pas les FK (et donc ON DELETE CASCADE) sans ce pragma
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def get_db():
    """Dependency yielding a DB session per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    # Importer les modèles pour qu'ils soient enregistrés sur Base.metadata
    from taskmanager.models import project, task, user  # noqa: F401

    Base.metadata.create_all(bind=engine)


def commit_or_rollback(db: Session) -> None:
    """Commit the unit of work, rolling the session back if the store refuses it."""
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error("Commit failed, session rolled back", exc_info=True)
        raise
