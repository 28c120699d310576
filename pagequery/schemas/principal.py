from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class Role(str, Enum):
    GUEST = "guest"
    MEMBER = "member"
    MODERATOR = "moderator"
    ADMIN = "admin"
    SELLER = "seller"


class Principal(BaseModel):
    """Who is calling; only used to allow or deny a listing."""

    id: Optional[UUID] = None
    role: Role = Role.GUEST

    @property
    def can_see_deleted(self) -> bool:
        return self.role in (Role.MODERATOR, Role.ADMIN)
