from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .pagination import PageRequest


class PostOut(BaseModel):
    id: UUID
    community_id: UUID
    author_id: UUID
    title: str
    body: str = ""
    topic: str
    status: str
    is_published: bool
    score: int = 0
    created_at: datetime
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PostSearchRequest(PageRequest):
    community_id: Optional[UUID] = None
    author_id: Optional[UUID] = None
    topic: Optional[str] = None
    is_published: Optional[bool] = None
    # Checked against the allowed statuses by the query engine.
    status: Optional[Union[str, list[str]]] = None
    search: Optional[str] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None
    include_deleted: Optional[bool] = None
