from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from .pagination import PageRequest


class InventoryItemOut(BaseModel):
    id: UUID
    seller_id: UUID
    sku: str
    name: str
    status: str
    quantity: int
    price: float
    created_at: datetime
    deleted_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class InventorySearchRequest(PageRequest):
    seller_id: Optional[UUID] = None
    sku: Optional[str] = None
    search: Optional[str] = None
    status: Optional[Union[str, list[str]]] = None
    min_quantity: Optional[int] = None
    max_quantity: Optional[int] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    include_deleted: Optional[bool] = None
