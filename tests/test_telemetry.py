from uuid import uuid4

import pytest
from prometheus_client import REGISTRY

from pagequery.core.errors import InvalidFilterValue
from pagequery.query import QueryExecutor
from pagequery.repositories import InMemoryRecordSource
from pagequery.services.listings import NOTIFICATIONS
from pagequery.telemetry import normalise_path, parse_headers


def test_normalise_path_collapses_identifiers():
    path = "/api/topics/0b6f2c1e-6a7d-4c53-9a53-2b1b8f9d5a10/replies/42"

    assert normalise_path(path) == "/api/topics/{uuid}/replies/{id}"


def test_parse_headers_skips_malformed_parts():
    assert parse_headers("a=1, b = two,broken,") == {"a": "1", "b": "two"}
    assert parse_headers(None) == {}


def _query_count(outcome: str) -> float:
    value = REGISTRY.get_sample_value(
        "pagequery_queries_total",
        {"collection": "notifications", "outcome": outcome},
    )
    return value or 0.0


def test_query_outcomes_are_counted():
    executor = QueryExecutor(NOTIFICATIONS, InMemoryRecordSource())
    ok_before = _query_count("ok")
    rejected_before = _query_count("invalid_filter_value")

    executor.execute({})
    with pytest.raises(InvalidFilterValue):
        executor.execute({"type": "spam"})

    assert _query_count("ok") == ok_before + 1
    assert _query_count("invalid_filter_value") == rejected_before + 1


def _request_count(method: str, path: str) -> float:
    value = REGISTRY.get_sample_value(
        "pagequery_http_requests_total",
        {"method": method, "path": path, "status": "200"},
    )
    return value or 0.0


def test_requests_are_labelled_by_route_template(client):
    template = "/api/topics/{topic_id}/replies"
    raw = f"/api/topics/{uuid4()}/replies"
    before = _request_count("PATCH", template)

    response = client.patch(raw, json={})

    assert response.status_code == 200
    assert _request_count("PATCH", template) == before + 1
    assert _request_count("PATCH", raw) == 0.0
