from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, TypeVar

from ..core.errors import InvalidPaginationParameter
from ..schemas.pagination import PaginationMeta

T = TypeVar("T")


def validate_page_params(page: Any, limit: Any) -> None:
    """Reject anything but positive integers for ``page`` and ``limit``."""

    for name, value in (("page", page), ("limit", limit)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidPaginationParameter(
                f"{name} must be an integer, got {type(value).__name__}",
                field=name,
            )
        if value < 1:
            raise InvalidPaginationParameter(f"{name} must be >= 1, got {value}", field=name)


def page_count(records: int, limit: int) -> int:
    if records == 0:
        return 0
    return math.ceil(records / limit)


def paginate(
    items: Sequence[T],
    page: int,
    limit: int,
    *,
    clamp_current: bool = False,
) -> tuple[list[T], PaginationMeta]:
    """Slice an ordered sequence into one page plus its metadata.

    Paging past the end yields an empty window. ``current`` echoes the
    requested page unless ``clamp_current`` is set, in which case it is pulled
    into ``[1, max(pages, 1)]`` and the window follows it.
    """

    validate_page_params(page, limit)
    records = len(items)
    pages = page_count(records, limit)
    current = page
    if clamp_current:
        current = min(max(page, 1), max(pages, 1))
    start = (current - 1) * limit
    window = list(items[start:start + limit])
    meta = PaginationMeta(
        current=current,
        limit=limit,
        records=records,
        pages=pages,
    )
    return window, meta
