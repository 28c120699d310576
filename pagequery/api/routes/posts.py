"""Community post search."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pagequery.api.deps import build_executor, get_db, get_principal, get_settings, guard_deleted, run_query
from pagequery.core.config import Settings
from pagequery.models import Post
from pagequery.schemas.pagination import Page
from pagequery.schemas.post import PostOut, PostSearchRequest
from pagequery.schemas.principal import Principal
from pagequery.services.listings import POSTS

router = APIRouter(prefix="/posts", tags=["posts"])


@router.patch("", response_model=Page[PostOut])
def search_posts(
    body: Optional[PostSearchRequest] = None,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    principal: Principal = Depends(get_principal),
):
    guard_deleted(body, principal)
    executor = build_executor(POSTS, db, Post, PostOut, settings)
    return run_query(executor, body)
