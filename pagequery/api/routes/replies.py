"""Reply listing for discussion topics."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pagequery.api.deps import build_executor, get_db, get_principal, get_settings, guard_deleted, run_query
from pagequery.core.config import Settings
from pagequery.models import Reply
from pagequery.schemas.pagination import Page
from pagequery.schemas.principal import Principal
from pagequery.schemas.reply import ReplyOut, ReplySearchRequest
from pagequery.services.listings import REPLIES

router = APIRouter(prefix="/topics", tags=["replies"])


@router.patch("/{topic_id}/replies", response_model=Page[ReplyOut])
def search_replies(
    topic_id: UUID,
    body: Optional[ReplySearchRequest] = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    principal: Principal = Depends(get_principal),
):
    """Search the replies of a topic; open to guests, deleted replies to staff only."""
    guard_deleted(body, principal)
    executor = build_executor(
        REPLIES, db, Reply, ReplyOut, settings, criteria=[Reply.topic_id == topic_id]
    )
    return run_query(executor, body)
