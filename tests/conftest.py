"""Pytest configuration and fixtures for listing tests."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pagequery.core.config import Settings, get_settings
from pagequery.db import Base, get_db
from pagequery.main import create_app
from pagequery import models  # noqa: F401 - ensure metadata is registered

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """A fixed timestamp ``minutes`` after the test epoch."""
    return BASE_TIME + timedelta(minutes=minutes)


@pytest.fixture
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture
def db_session(db_engine):
    """Create a database session for testing."""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def settings():
    return Settings(default_page_limit=20, max_page_limit=100)


@pytest.fixture
def client(db_session, settings):
    app = create_app(create_tables=False)

    def _get_db():
        yield db_session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)


def create_access_token(subject: str, role: str, expires_minutes: int = 5) -> str:
    """Sign a token the way the identity service does, using the app settings."""
    config = get_settings()
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    payload = {"sub": subject, "role": role, "exp": expire}
    return jwt.encode(payload, config.jwt_secret, algorithm=config.jwt_algorithm)


def auth_headers(role: str, user_id=None) -> dict[str, str]:
    token = create_access_token(str(user_id or uuid4()), role)
    return {"Authorization": f"Bearer {token}"}
