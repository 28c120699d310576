"""Sort key resolution.

A listing may be sorted by a token such as ``created_at_desc`` or by a
``sort_by``/``sort_order`` pair. Whatever the primary key, ties fall back to
the record identifier in ascending order so repeated queries against the same
data always page the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Callable, Iterable

from ..core.errors import UnsupportedSortKey
from .definition import SORT_ORDERS, QueryDefinition
from .filters import field_value, normalise


@dataclass(frozen=True)
class SortSpec:
    key: str
    field: str
    order: str
    id_field: str = "id"

    @property
    def descending(self) -> bool:
        return self.order == "desc"

    def comparator(self) -> Callable[[Any, Any], int]:
        field = self.field
        id_field = self.id_field
        sign = -1 if self.descending else 1

        def compare(left: Any, right: Any) -> int:
            a = normalise(field_value(left, field))
            b = normalise(field_value(right, field))
            # Nulls go last whichever way the primary key runs.
            if a is None and b is not None:
                return 1
            if b is None and a is not None:
                return -1
            result = _compare_values(a, b) * sign
            if result:
                return result
            return _compare_values(field_value(left, id_field), field_value(right, id_field))

        return compare

    def apply(self, records: Iterable[Any]) -> list[Any]:
        return sorted(records, key=cmp_to_key(self.comparator()))


def resolve_sort(
    definition: QueryDefinition,
    sort_by: str | None = None,
    sort_order: str | None = None,
) -> SortSpec:
    order = definition.default_order
    if sort_order is not None:
        if not isinstance(sort_order, str) or sort_order.lower() not in SORT_ORDERS:
            raise UnsupportedSortKey(
                f"sort_order must be 'asc' or 'desc', got {sort_order!r}",
                field="sort_order",
            )
        order = sort_order.lower()

    if sort_by is None:
        key = definition.default_sort
    elif not isinstance(sort_by, str):
        raise UnsupportedSortKey(f"sort_by must be a string, got {sort_by!r}", field="sort_by")
    elif sort_by in definition.sort_keys:
        key = sort_by
    else:
        key, _, suffix = sort_by.rpartition("_")
        if key not in definition.sort_keys or suffix.lower() not in SORT_ORDERS:
            supported = ", ".join(sorted(definition.sort_keys))
            raise UnsupportedSortKey(
                f"unsupported sort for {definition.name}: {sort_by!r} (supported: {supported})",
                field="sort_by",
            )
        order = suffix.lower()

    return SortSpec(
        key=key,
        field=definition.sort_keys[key],
        order=order,
        id_field=definition.id_field,
    )


def _compare_values(a: Any, b: Any) -> int:
    if a == b:
        return 0
    if a is None:
        return 1
    if b is None:
        return -1
    try:
        return -1 if a < b else 1
    except TypeError:
        # Mixed types (e.g. int and UUID identifiers) fall back to text order.
        left, right = str(a), str(b)
        if left == right:
            return 0
        return -1 if left < right else 1
