from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .pagination import PageRequest


class ReplyOut(BaseModel):
    id: UUID
    topic_id: UUID
    author_id: UUID
    parent_reply_id: Optional[UUID] = None
    content: str
    depth: int = 0
    vote_score: int = 0
    created_at: datetime
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ReplySearchRequest(PageRequest):
    """Filters accepted when listing the replies of one topic."""

    author_id: Optional[UUID] = None
    search: Optional[str] = None
    min_depth_level: Optional[int] = None
    max_depth_level: Optional[int] = None
    min_vote_score: Optional[int] = None
    max_vote_score: Optional[int] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None
    include_deleted: Optional[bool] = None
