from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginationMeta(BaseModel):
    """Metadata describing one page of a listing."""

    current: int
    limit: int
    records: int
    pages: int


class Page(BaseModel, Generic[T]):
    """A window of matching records plus its pagination metadata."""

    data: list[T]
    pagination: PaginationMeta


class PageRequest(BaseModel):
    """Paging and sorting fields shared by every listing request.

    Bounds are left to the query engine so that programmatic callers and HTTP
    callers see the same errors.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    page: Optional[int] = Field(default=None, description="1-indexed page number")
    limit: Optional[int] = Field(default=None, description="Records per page")
    sort_by: Optional[str] = Field(
        default=None,
        description="Sort key, optionally suffixed with _asc or _desc",
    )
    # Case-insensitive; checked by the query engine.
    sort_order: Optional[str] = None
