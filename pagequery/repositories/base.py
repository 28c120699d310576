from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Protocol, Sequence, TypeVar

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.orm import Session

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class RecordSource(Protocol[T_co]):
    """Anything the query engine can enumerate."""

    def fetch(self) -> Iterable[T_co]:
        ...


class InMemoryRecordSource(Generic[T]):
    """List-backed source used by tests and by callers that already hold the rows."""

    def __init__(
        self,
        records: Iterable[T] = (),
        *,
        where: Callable[[T], bool] | None = None,
    ) -> None:
        self._records: list[T] = list(records)
        self._where = where

    def add(self, record: T) -> T:
        self._records.append(record)
        return record

    def extend(self, records: Iterable[T]) -> None:
        self._records.extend(records)

    def fetch(self) -> list[T]:
        if self._where is None:
            return list(self._records)
        return [record for record in self._records if self._where(record)]

    def __len__(self) -> int:
        return len(self._records)


class SqlAlchemyRecordSource(Generic[T]):
    """Reads one table, optionally narrowed by SQL criteria.

    Rows are converted with ``schema.model_validate`` when a schema is given,
    otherwise the ORM objects are returned as they are.
    """

    def __init__(
        self,
        session: Session,
        model: type,
        schema: type[BaseModel] | None = None,
        criteria: Sequence[Any] = (),
    ) -> None:
        self._session = session
        self._model = model
        self._schema = schema
        self._criteria = tuple(criteria)

    def fetch(self) -> list[Any]:
        query = select(self._model)
        if self._criteria:
            query = query.where(*self._criteria)
        rows = self._session.execute(query).scalars().all()
        if self._schema is None:
            return list(rows)
        return [self._schema.model_validate(row) for row in rows]
