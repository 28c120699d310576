"""Query definitions for every listing endpoint.

Each definition names the request keys a listing accepts, the record fields
they constrain, and the sort keys it can be ordered by.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from ..query import Contains, Equals, OneOf, QueryDefinition, Range, SoftDelete

POST_STATUSES = frozenset({"draft", "published", "archived"})
NOTIFICATION_TYPES = frozenset({"success", "info", "warning", "error"})
INVENTORY_STATUSES = frozenset({"active", "out_of_stock", "discontinued"})


def _created_between() -> Range:
    return Range("created_at", "created_at_from", "created_at_to", value_type=datetime)


REPLIES = QueryDefinition(
    name="replies",
    filters=(
        Equals("author_id", value_type=UUID),
        Contains("search", fields=("content",)),
        Range("depth", "min_depth_level", "max_depth_level", value_type=int),
        Range("vote_score", "min_vote_score", "max_vote_score", value_type=int),
        _created_between(),
        SoftDelete(),
    ),
    sort_keys={"created_at": "created_at", "vote_score": "vote_score", "depth": "depth"},
    default_sort="created_at",
    default_order="asc",
)

POSTS = QueryDefinition(
    name="posts",
    filters=(
        Equals("community_id", value_type=UUID),
        Equals("author_id", value_type=UUID),
        Equals("topic"),
        Equals("is_published", value_type=bool),
        OneOf("status", POST_STATUSES),
        Contains("search", fields=("title", "body")),
        _created_between(),
        SoftDelete(),
    ),
    sort_keys={"created_at": "created_at", "score": "score", "title": "title"},
)

AUDIT_LOGS = QueryDefinition(
    name="audit_logs",
    filters=(
        Equals("action_type"),
        Equals("domain"),
        Equals("acting_admin_id", value_type=UUID),
        Contains("search", fields=("description",)),
        _created_between(),
    ),
    sort_keys={"created_at": "created_at", "action_type": "action_type"},
)

NOTIFICATIONS = QueryDefinition(
    name="notifications",
    filters=(
        OneOf("type", NOTIFICATION_TYPES),
        Equals("read", value_type=bool),
        _created_between(),
    ),
)

INVENTORY = QueryDefinition(
    name="inventory",
    filters=(
        Equals("seller_id", value_type=UUID),
        Equals("sku"),
        Contains("search", fields=("name",)),
        OneOf("status", INVENTORY_STATUSES),
        Range("quantity", "min_quantity", "max_quantity", value_type=int),
        Range("price", "min_price", "max_price", value_type=float),
        SoftDelete(),
    ),
    sort_keys={
        "created_at": "created_at",
        "price": "price",
        "quantity": "quantity",
        "name": "name",
    },
)

DEFINITIONS = {
    definition.name: definition
    for definition in (REPLIES, POSTS, AUDIT_LOGS, NOTIFICATIONS, INVENTORY)
}
