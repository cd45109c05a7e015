from .query import (
    Q,
    Query,
    delete,
    deserialize,
    insert,
    select,
    stats,
    table,
    update,
)

__all__ = [
    "Q",
    "Query",
    "delete",
    "deserialize",
    "insert",
    "select",
    "stats",
    "table",
    "update",
]
