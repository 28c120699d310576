"""SQLAlchemy engine and session management."""

from __future__ import annotations

from typing import Generator

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from ..core.config import get_settings
from .base import Base

_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """Return a singleton engine bound to the configured database."""

    global _engine
    if _engine is None:
        settings = get_settings()
        connect_args = {}
        if settings.database_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        _engine = create_engine(settings.database_url, connect_args=connect_args)
    return _engine


def get_sessionmaker() -> sessionmaker[Session]:
    """Return a lazily initialised session factory."""

    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _session_factory


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency that yields a session."""

    db = get_sessionmaker()()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    """Create tables for all registered models if they do not exist."""

    # Import models to ensure metadata is populated before create_all.
    from .. import models  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
