"""Notification schemas for listing requests and responses."""

from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .pagination import PageRequest


class NotificationOut(BaseModel):
    id: UUID
    recipient_id: UUID
    title: str
    message: str
    type: str = "info"
    read: bool = False
    link: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationSearchRequest(PageRequest):
    type: Optional[Union[str, list[str]]] = None
    read: Optional[bool] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None
