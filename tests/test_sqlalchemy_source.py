"""Tests for reading listings out of the relational store."""

from uuid import uuid4

from pagequery.models import Reply
from pagequery.query import QueryExecutor
from pagequery.repositories import SqlAlchemyRecordSource
from pagequery.schemas.reply import ReplyOut
from pagequery.services.listings import REPLIES
from tests.conftest import at


def seed_replies(db_session, topic_id, count, **fields):
    replies = []
    for i in range(count):
        reply = Reply(
            topic_id=topic_id,
            author_id=fields.get("author_id", uuid4()),
            content=fields.get("content", f"Reply number {i}"),
            depth=fields.get("depth", i % 3),
            vote_score=fields.get("vote_score", i),
            created_at=at(i),
            deleted_at=fields.get("deleted_at"),
        )
        db_session.add(reply)
        replies.append(reply)
    db_session.commit()
    return replies


def test_criteria_scope_rows_and_schema_converts_them(db_session):
    topic_id = uuid4()
    seed_replies(db_session, topic_id, 4)
    seed_replies(db_session, uuid4(), 3)

    source = SqlAlchemyRecordSource(db_session, Reply, ReplyOut, criteria=[Reply.topic_id == topic_id])
    rows = source.fetch()

    assert len(rows) == 4
    assert all(isinstance(row, ReplyOut) for row in rows)
    assert {row.topic_id for row in rows} == {topic_id}


def test_without_schema_orm_rows_are_returned(db_session):
    seed_replies(db_session, uuid4(), 2)

    rows = SqlAlchemyRecordSource(db_session, Reply).fetch()

    assert all(isinstance(row, Reply) for row in rows)


def test_depth_and_date_filters_over_database_rows(db_session):
    topic_id = uuid4()
    seed_replies(db_session, topic_id, 9)
    source = SqlAlchemyRecordSource(db_session, Reply, ReplyOut, criteria=[Reply.topic_id == topic_id])
    executor = QueryExecutor(REPLIES, source)

    page = executor.execute(
        {
            "min_depth_level": 1,
            "max_depth_level": 2,
            "created_at_from": at(2).isoformat(),
            "created_at_to": at(7),
            "sort_by": "created_at_desc",
        }
    )

    # depths cycle 0,1,2 so minutes 2,4,5,7 qualify inside [2, 7]
    assert [row.vote_score for row in page.data] == [7, 5, 4, 2]
    assert page.pagination.records == 4


def test_soft_deleted_rows_are_hidden_by_default(db_session):
    topic_id = uuid4()
    seed_replies(db_session, topic_id, 3)
    seed_replies(db_session, topic_id, 2, deleted_at=at(100))
    source = SqlAlchemyRecordSource(db_session, Reply, ReplyOut)
    executor = QueryExecutor(REPLIES, source)

    assert executor.execute().pagination.records == 3
    assert executor.execute({"include_deleted": True}).pagination.records == 5


def test_search_is_case_insensitive_on_database_text(db_session):
    topic_id = uuid4()
    seed_replies(db_session, topic_id, 2, content="Prisma migration tips")
    seed_replies(db_session, topic_id, 3, content="unrelated")
    executor = QueryExecutor(REPLIES, SqlAlchemyRecordSource(db_session, Reply, ReplyOut))

    page = executor.execute({"search": "PRISMA"})

    assert page.pagination.records == 2
