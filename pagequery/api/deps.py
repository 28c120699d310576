from __future__ import annotations

from collections.abc import Callable
from typing import Any, Sequence, TypeVar
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..core.config import Settings, get_settings
from ..core.errors import QueryError
from ..core.security import decode_access_token
from ..db import get_db
from ..query import QueryDefinition, QueryExecutor
from ..repositories import SqlAlchemyRecordSource
from ..schemas.pagination import Page
from ..schemas.principal import Principal, Role

T = TypeVar("T")

_http_bearer = HTTPBearer(auto_error=False)


def get_principal(
    credentials: HTTPAuthorizationCredentials | None = Depends(_http_bearer),
) -> Principal:
    """Resolve the caller from a bearer token; no token means a guest."""

    if credentials is None:
        return Principal()
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        ) from exc
    try:
        return Principal(id=UUID(payload["sub"]), role=Role(payload.get("role", Role.MEMBER)))
    except (KeyError, TypeError, ValueError) as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        ) from exc


def require_role(*roles: Role) -> Callable[[Principal], Principal]:
    allowed_roles = set(roles)

    def dependency(principal: Principal = Depends(get_principal)) -> Principal:
        if allowed_roles and principal.role not in allowed_roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient role",
            )
        return principal

    return dependency


def guard_deleted(request: BaseModel | None, principal: Principal) -> None:
    """Only moderators and admins may ask for soft-deleted content."""

    if getattr(request, "include_deleted", None) and not principal.can_see_deleted:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Insufficient role to include deleted records",
        )


def build_executor(
    definition: QueryDefinition,
    db: Session,
    model: type,
    schema: type[BaseModel],
    settings: Settings,
    criteria: Sequence[Any] = (),
) -> QueryExecutor[Any]:
    source = SqlAlchemyRecordSource(db, model, schema, criteria=criteria)
    return QueryExecutor(
        definition,
        source,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
        clamp_current_page=settings.clamp_current_page,
    )


def run_query(executor: QueryExecutor[T], request: BaseModel | None) -> Page[T]:
    """Execute a listing, turning engine rejections into HTTP 400 responses."""

    try:
        return executor.execute(request)
    except QueryError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.to_dict(),
        ) from exc


__all__ = [
    "build_executor",
    "get_db",
    "get_principal",
    "get_settings",
    "guard_deleted",
    "require_role",
    "run_query",
]
