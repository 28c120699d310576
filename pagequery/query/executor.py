"""Turns a listing request into one deterministic page of records."""

from __future__ import annotations

import time
from typing import Any, Generic, Mapping, TypeVar

import structlog
from pydantic import BaseModel

from ..core.errors import InvalidFilterValue, QueryError
from ..repositories.base import RecordSource
from ..schemas.pagination import Page
from ..telemetry.metrics import QUERY_COUNT, QUERY_LATENCY
from .definition import QueryDefinition
from .pager import paginate, validate_page_params
from .predicates import build_predicate, filter_values
from .sorting import resolve_sort

logger = structlog.get_logger()

T = TypeVar("T")


class QueryExecutor(Generic[T]):
    """Filter, order and page one record source according to a definition.

    The executor holds no per-call state, so one instance may serve concurrent
    callers. Each call reads the source exactly once, after the request has
    been fully validated.
    """

    def __init__(
        self,
        definition: QueryDefinition,
        source: RecordSource[T],
        *,
        default_limit: int = 20,
        max_limit: int = 100,
        clamp_current_page: bool = False,
    ) -> None:
        validate_page_params(1, default_limit)
        validate_page_params(1, max_limit)
        if default_limit > max_limit:
            raise ValueError("default_limit must not exceed max_limit")
        self.definition = definition
        self.source = source
        self.default_limit = default_limit
        self.max_limit = max_limit
        self.clamp_current_page = clamp_current_page

    def execute(self, request: BaseModel | Mapping[str, Any] | None = None) -> Page[T]:
        started = time.perf_counter()
        try:
            raw = _as_mapping(request)
            page = raw.get("page", 1)
            limit = raw.get("limit", self.default_limit)
            validate_page_params(page, limit)
            limit = min(limit, self.max_limit)
            predicate = build_predicate(self.definition, filter_values(raw))
            sort = resolve_sort(self.definition, raw.get("sort_by"), raw.get("sort_order"))
        except QueryError as exc:
            QUERY_COUNT.labels(collection=self.definition.name, outcome=exc.code).inc()
            logger.info(
                "query.rejected",
                collection=self.definition.name,
                code=exc.code,
                field=exc.field,
                reason=exc.message,
            )
            raise

        matching = [record for record in self.source.fetch() if predicate(record)]
        ordered = sort.apply(matching)
        window, meta = paginate(ordered, page, limit, clamp_current=self.clamp_current_page)

        duration = time.perf_counter() - started
        QUERY_COUNT.labels(collection=self.definition.name, outcome="ok").inc()
        QUERY_LATENCY.labels(collection=self.definition.name).observe(duration)
        logger.debug(
            "query.executed",
            collection=self.definition.name,
            page=meta.current,
            limit=meta.limit,
            records=meta.records,
            pages=meta.pages,
            sort=f"{sort.key}_{sort.order}",
            duration_ms=round(duration * 1000, 2),
        )
        return Page[Any](data=window, pagination=meta)


def _as_mapping(request: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    if request is None:
        return {}
    if isinstance(request, BaseModel):
        return request.model_dump(exclude_none=True)
    if isinstance(request, Mapping):
        return {key: value for key, value in request.items() if value is not None}
    raise InvalidFilterValue(
        f"listing request must be a mapping, got {type(request).__name__}"
    )
