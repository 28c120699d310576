from .base import InMemoryRecordSource, RecordSource, SqlAlchemyRecordSource

__all__ = ["InMemoryRecordSource", "RecordSource", "SqlAlchemyRecordSource"]
