"""Database connection and session management."""

from contextlib import contextmanager
from functools import lru_cache
from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from npcforge.config import get_settings
from npcforge.database.models.base import Base


@lru_cache
def get_engine(database_url: str | None = None) -> Engine:
    """Create (once per URL) the engine for a save store."""
    settings = get_settings()
    return create_engine(
        database_url or settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
    )


def get_session_factory(database_url: str | None = None) -> sessionmaker[Session]:
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=get_engine(database_url),
    )


def init_db(database_url: str | None = None) -> None:
    """Create the save store tables if they do not exist."""
    Base.metadata.create_all(bind=get_engine(database_url))


@contextmanager
def get_db_session(database_url: str | None = None) -> Generator[Session, None, None]:
    """Get a database session with automatic cleanup.

    Usage:
        with get_db_session() as db:
            slots = SaveManager(db).list_slots()
    """
    session = get_session_factory(database_url)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
