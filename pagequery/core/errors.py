"""Errors raised by the query engine.

All of them are validation failures detected before the backing collection is
scanned. They subclass ``ValueError`` so plain callers can treat them as bad
input without importing this module.
"""

from __future__ import annotations

from typing import Any


class QueryError(ValueError):
    """Base class for rejected listing requests."""

    code = "query_error"

    def __init__(self, message: str, *, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.field is not None:
            payload["field"] = self.field
        return payload


class InvalidPaginationParameter(QueryError):
    code = "invalid_pagination_parameter"


class InvalidFilterValue(QueryError):
    code = "invalid_filter_value"


class UnsupportedSortKey(QueryError):
    code = "unsupported_sort_key"
