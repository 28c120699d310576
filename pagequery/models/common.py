from datetime import datetime, timezone

from sqlalchemy import Column, DateTime


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """Shared timestamp columns for most tables."""

    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class SoftDeleteMixin:
    """Rows are hidden from listings, not removed, when ``deleted_at`` is set."""

    deleted_at = Column(DateTime(timezone=True), nullable=True)
