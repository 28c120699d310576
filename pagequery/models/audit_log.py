from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pagequery.db.base import Base
from pagequery.models.common import TimestampMixin


class AdminAuditLog(Base, TimestampMixin):
    """An administrative action recorded for later review."""

    __tablename__ = "admin_audit_logs"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    acting_admin_id: Mapped[UUID] = mapped_column(Uuid, index=True, nullable=False)
    action_type: Mapped[str] = mapped_column(String(80), nullable=False)
    domain: Mapped[str] = mapped_column(String(80), nullable=False)
    target_id: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
