"""Filter fields accepted by listing requests.

Each class describes one semantic category of filter. A field knows which
request key(s) it reads, how to coerce the raw value, and how to test a record
against the coerced value. Omitted (``None``) request values never constrain.
"""

from __future__ import annotations

import math
from collections.abc import Hashable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Mapping
from uuid import UUID

from ..core.errors import InvalidFilterValue

Check = Callable[[Any], bool]

_MISSING = object()


def field_value(record: Any, name: str) -> Any:
    """Read ``name`` from a mapping or attribute-style record; missing reads as None."""

    if isinstance(record, Mapping):
        return record.get(name)
    value = getattr(record, name, _MISSING)
    return None if value is _MISSING else value


def normalise(value: Any) -> Any:
    """Make values from different sources comparable with each other."""

    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def coerce(value: Any, value_type: type, key: str) -> Any:
    if value_type is bool:
        if isinstance(value, bool):
            return value
    elif value_type is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif value_type is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value):
            return float(value)
    elif value_type is str:
        if isinstance(value, str):
            return value
    elif value_type is datetime:
        if isinstance(value, datetime):
            return normalise(value)
        if isinstance(value, str):
            try:
                return normalise(datetime.fromisoformat(value.replace("Z", "+00:00")))
            except ValueError:
                pass
    elif value_type is UUID:
        if isinstance(value, UUID):
            return value
        if isinstance(value, str):
            try:
                return UUID(value)
            except ValueError:
                pass
    else:
        if isinstance(value, value_type):
            return value
    raise InvalidFilterValue(
        f"{key} expects a {value_type.__name__} value, got {type(value).__name__}",
        field=key,
    )


@dataclass(frozen=True)
class Equals:
    """Exact match on one record field."""

    name: str
    field: str | None = None
    value_type: type = str

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.name,)

    def compile(self, raw: Mapping[str, Any]) -> Check | None:
        value = raw.get(self.name)
        if value is None:
            return None
        expected = coerce(value, self.value_type, self.name)
        field = self.field or self.name
        return lambda record: normalise(field_value(record, field)) == expected


@dataclass(frozen=True)
class Range:
    """Inclusive bounds on one record field, each bound optional."""

    field: str
    lower: str
    upper: str
    value_type: type = int

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.lower, self.upper)

    def compile(self, raw: Mapping[str, Any]) -> Check | None:
        low = raw.get(self.lower)
        high = raw.get(self.upper)
        if low is None and high is None:
            return None
        if low is not None:
            low = coerce(low, self.value_type, self.lower)
        if high is not None:
            high = coerce(high, self.value_type, self.upper)
        field = self.field

        def check(record: Any) -> bool:
            value = normalise(field_value(record, field))
            if value is None:
                return False
            try:
                if low is not None and value < low:
                    return False
                if high is not None and value > high:
                    return False
            except TypeError:
                return False
            return True

        return check


@dataclass(frozen=True)
class Contains:
    """Case-insensitive substring search over one or more text fields.

    With several fields a record matches when any of them contains the text.
    """

    name: str
    fields: tuple[str, ...]

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.name,)

    def compile(self, raw: Mapping[str, Any]) -> Check | None:
        value = raw.get(self.name)
        if value is None:
            return None
        needle = coerce(value, str, self.name).casefold()
        fields = self.fields

        def check(record: Any) -> bool:
            for field in fields:
                text = field_value(record, field)
                if text is not None and needle in str(text).casefold():
                    return True
            return False

        return check


@dataclass(frozen=True)
class OneOf:
    """Membership in a fixed set of allowed values.

    The request may carry one value or a list; all of them must be allowed.
    """

    name: str
    choices: frozenset[str]
    field: str | None = None

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.name,)

    def compile(self, raw: Mapping[str, Any]) -> Check | None:
        value = raw.get(self.name)
        if value is None:
            return None
        values: Iterable[Any] = value if isinstance(value, (list, tuple, set, frozenset)) else (value,)
        wanted = set()
        for item in values:
            # Enum members from pydantic request models compare by their value.
            item = getattr(item, "value", item)
            if not isinstance(item, Hashable) or item not in self.choices:
                allowed = ", ".join(sorted(self.choices))
                raise InvalidFilterValue(
                    f"{self.name} must be one of: {allowed}; got {item!r}",
                    field=self.name,
                )
            wanted.add(item)
        if not wanted:
            raise InvalidFilterValue(f"{self.name} must not be empty", field=self.name)
        field = self.field or self.name

        def check(record: Any) -> bool:
            current = field_value(record, field)
            return getattr(current, "value", current) in wanted

        return check


@dataclass(frozen=True)
class SoftDelete:
    """Hide soft-deleted records unless the request opts in."""

    name: str = "include_deleted"
    field: str = "deleted_at"

    @property
    def keys(self) -> tuple[str, ...]:
        return (self.name,)

    def compile(self, raw: Mapping[str, Any]) -> Check | None:
        value = raw.get(self.name)
        if value is not None and coerce(value, bool, self.name):
            return None
        field = self.field
        return lambda record: field_value(record, field) is None


FilterField = Equals | Range | Contains | OneOf | SoftDelete
