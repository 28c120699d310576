"""Notification listing for the signed-in user."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pagequery.api.deps import build_executor, get_db, get_settings, require_role, run_query
from pagequery.core.config import Settings
from pagequery.models import Notification
from pagequery.schemas.notification import NotificationOut, NotificationSearchRequest
from pagequery.schemas.pagination import Page
from pagequery.schemas.principal import Principal, Role
from pagequery.services.listings import NOTIFICATIONS

router = APIRouter(prefix="/me/notifications", tags=["notifications"])


@router.patch("", response_model=Page[NotificationOut])
def list_notifications(
    body: Optional[NotificationSearchRequest] = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    principal: Principal = Depends(
        require_role(Role.MEMBER, Role.MODERATOR, Role.ADMIN, Role.SELLER)
    ),
):
    """List the caller's notifications, newest first unless asked otherwise."""
    executor = build_executor(
        NOTIFICATIONS,
        db,
        Notification,
        NotificationOut,
        settings,
        criteria=[Notification.recipient_id == principal.id],
    )
    return run_query(executor, body)
