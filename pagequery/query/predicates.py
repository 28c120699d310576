from __future__ import annotations

from typing import Any, Callable, Mapping

from ..core.errors import InvalidFilterValue
from .definition import PAGING_KEYS, QueryDefinition

Predicate = Callable[[Any], bool]


def build_predicate(definition: QueryDefinition, filters: Mapping[str, Any]) -> Predicate:
    """Compile the filter part of a request into one record predicate.

    Every supplied value is checked here, so a bad request fails before any
    record is read. The result is the AND of all supplied constraints.
    """

    unknown = sorted(set(filters) - definition.filter_names())
    if unknown:
        raise InvalidFilterValue(
            f"unknown filter for {definition.name}: {', '.join(unknown)}",
            field=unknown[0],
        )

    checks = []
    for item in definition.filters:
        check = item.compile(filters)
        if check is not None:
            checks.append(check)

    if not checks:
        return _match_all

    def predicate(record: Any) -> bool:
        return all(check(record) for check in checks)

    return predicate


def filter_values(request: Mapping[str, Any]) -> dict[str, Any]:
    """Strip paging and sorting keys from a request."""

    return {key: value for key, value in request.items() if key not in PAGING_KEYS}


def _match_all(record: Any) -> bool:
    return True
