import logging

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from coaching_app.core.config import settings
from coaching_app.core.exceptions import ConflictError, StoreError

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # SQLite connections are handed between threadpool workers
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": 10,
        "max_overflow": 20,
        "pool_pre_ping": True,  # Test connections before using them to detect stale connections
        "pool_recycle": 3600,  # Recycle connections after 1 hour
        "pool_timeout": 30,
    }


engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    **_engine_options(settings.DATABASE_URL),
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def commit_or_raise(db: Session, conflict_message: str) -> None:
    """Commit the session, translating constraint violations into ConflictError."""
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning(f"Constraint violation on commit ({type(exc.orig).__name__})")
        raise ConflictError(conflict_message) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Commit failed: {exc}")
        raise StoreError(str(exc)) from exc
