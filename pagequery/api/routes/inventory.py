"""Seller inventory search."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pagequery.api.deps import build_executor, get_db, get_settings, require_role, run_query
from pagequery.core.config import Settings
from pagequery.models import InventoryItem
from pagequery.schemas.inventory import InventoryItemOut, InventorySearchRequest
from pagequery.schemas.pagination import Page
from pagequery.schemas.principal import Principal, Role
from pagequery.services.listings import INVENTORY

router = APIRouter(prefix="/inventory", tags=["inventory"])


@router.patch("", response_model=Page[InventoryItemOut])
def search_inventory(
    body: Optional[InventorySearchRequest] = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    principal: Principal = Depends(require_role(Role.SELLER, Role.ADMIN)),
):
    """Sellers only ever see their own stock; admins see every seller's."""
    criteria = []
    if principal.role is Role.SELLER:
        criteria.append(InventoryItem.seller_id == principal.id)
    executor = build_executor(INVENTORY, db, InventoryItem, InventoryItemOut, settings, criteria=criteria)
    return run_query(executor, body)
