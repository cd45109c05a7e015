"""Public entry points for building and restoring statements.

The module-level factories are also exposed as static methods on ``Query``
(aliased ``Q``) so callers can write ``Q.select().from_("users")``.
"""

from typing import Mapping, Optional

from sqltree.flavors import Flavor, flavors as _flavors
from sqltree.nodes import (
    DeleteMutation,
    InsertMutation,
    NodeBuilder,
    SelectQuery,
    SQLNode,
    Table,
    UpdateMutation,
)
from sqltree.nodes.base import build_model
from sqltree.nodes.query import TableSource


def table(name: TableSource, alias: Optional[str] = None) -> Table:
    """Create a table reference usable in joins."""
    return build_model(Table, source=name, alias=alias)


def select() -> SelectQuery:
    """Create an empty select query (``SELECT *``)."""
    return SelectQuery()


def stats() -> SelectQuery:
    """Create the statistics template ``SELECT * FROM (?) AS `t` ``.

    The ``(?)`` placeholder is kept verbatim so a caller can substitute an
    inner statement textually.
    """
    return select().from_("(?)", "t")


def delete(from_: TableSource, alias: Optional[str] = None) -> DeleteMutation:
    return DeleteMutation().from_(from_, alias)


def update(table_name: TableSource, alias: Optional[str] = None) -> UpdateMutation:
    return UpdateMutation().from_(table_name, alias)


def insert(into: str) -> InsertMutation:
    return build_model(InsertMutation, table_name=into)


def deserialize(text: str) -> SQLNode:
    """Reconstruct any node from its JSON text.

    Raises:
        SQLTreeError: PARSE_ERROR for malformed JSON, UNKNOWN_NODE_TYPE for
            an unregistered ``type`` tag.
    """
    return NodeBuilder.deserialize(text)


class Query:
    """Entry points for building statements (aliased as ``Q``).

    Example:
        >>> Q.select().from_("users").where(C.equal("id", 1)).to_sql()
        'SELECT * FROM `users` WHERE `id` = 1'
    """

    flavors: Mapping[str, Flavor] = _flavors

    table = staticmethod(table)
    select = staticmethod(select)
    stats = staticmethod(stats)
    delete = staticmethod(delete)
    update = staticmethod(update)
    insert = staticmethod(insert)
    deserialize = staticmethod(deserialize)


Q = Query
