from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from pagequery.db.base import Base
from pagequery.models.common import SoftDeleteMixin, TimestampMixin


class Reply(Base, TimestampMixin, SoftDeleteMixin):
    """A reply in a discussion topic; nested replies carry a depth > 0."""

    __tablename__ = "replies"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    topic_id: Mapped[UUID] = mapped_column(Uuid, index=True, nullable=False)
    author_id: Mapped[UUID] = mapped_column(Uuid, index=True, nullable=False)
    parent_reply_id: Mapped[Optional[UUID]] = mapped_column(Uuid, nullable=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    depth: Mapped[int] = mapped_column(Integer, default=0)
    vote_score: Mapped[int] = mapped_column(Integer, default=0)
