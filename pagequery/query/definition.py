from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .filters import FilterField

PAGING_KEYS = frozenset({"page", "limit", "sort_by", "sort_order"})
SORT_ORDERS = ("asc", "desc")


@dataclass(frozen=True)
class QueryDefinition:
    """Describes what one listing accepts: its filters and its sort keys."""

    name: str
    filters: tuple[FilterField, ...] = ()
    sort_keys: Mapping[str, str] = field(default_factory=lambda: {"created_at": "created_at"})
    default_sort: str = "created_at"
    default_order: str = "desc"
    id_field: str = "id"

    def __post_init__(self) -> None:
        if self.default_sort not in self.sort_keys:
            raise ValueError(f"{self.name}: default sort {self.default_sort!r} is not a sort key")
        if self.default_order not in SORT_ORDERS:
            raise ValueError(f"{self.name}: default order must be 'asc' or 'desc'")
        seen: set[str] = set(PAGING_KEYS)
        for item in self.filters:
            for key in item.keys:
                if key in seen:
                    raise ValueError(f"{self.name}: request key {key!r} is declared twice")
                seen.add(key)

    def filter_names(self) -> frozenset[str]:
        names: set[str] = set(PAGING_KEYS)
        for item in self.filters:
            names.update(item.keys)
        return frozenset(names)
