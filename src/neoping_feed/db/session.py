"""Database session configuration."""

from __future__ import annotations

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from neoping_feed.core.exceptions import ConflictError, PersistenceError
from neoping_feed.core.settings import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import neoping_feed.models  # noqa: E402,F401

engine = create_engine(
    settings.effective_database_url,
    pool_pre_ping=True,
    echo=settings.sql_debug,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session, action: str = "complete the request") -> Iterator[Session]:
    """Run the enclosed block as one transaction.

    Commits when the block exits cleanly. Store failures roll back every
    change made inside the block and surface as `PersistenceError` with a
    message that does not leak driver text; other exceptions roll back and
    propagate unchanged.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Constraint conflict while trying to %s: %s", action, exc.orig)
        raise ConflictError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Store failure while trying to %s", action, exc_info=True)
        raise PersistenceError(f"Failed to {action}") from exc
    except Exception:
        db.rollback()
        raise


def create_tables() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Translate store failures during reads into `PersistenceError`."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("Store failure while trying to %s", action, exc_info=True)
        raise PersistenceError(f"Failed to {action}") from exc
