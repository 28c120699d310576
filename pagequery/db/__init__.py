"""Database session and metadata helpers."""

from .base import Base
from .session import get_db, get_engine, get_sessionmaker, init_db

__all__ = [
    "Base",
    "get_db",
    "get_engine",
    "get_sessionmaker",
    "init_db",
]
