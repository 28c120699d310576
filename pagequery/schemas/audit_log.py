from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .pagination import PageRequest


class AuditLogOut(BaseModel):
    id: UUID
    acting_admin_id: UUID
    action_type: str
    domain: str
    target_id: Optional[UUID] = None
    description: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuditLogSearchRequest(PageRequest):
    action_type: Optional[str] = None
    domain: Optional[str] = None
    acting_admin_id: Optional[UUID] = None
    search: Optional[str] = None
    created_at_from: Optional[datetime] = None
    created_at_to: Optional[datetime] = None
