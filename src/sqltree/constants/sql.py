"""SQL and AST-related constants.

This module contains the enums shared by every layer of the package: the
``type`` discriminators written into serialized nodes and the small closed
vocabularies (join kinds, union kinds, sort directions) used by the builders.

These constants are in Layer 0 and have no dependencies on other sqltree
modules.
"""

from enum import Enum


class NodeType(str, Enum):
    """Discriminator values written to the ``type`` key of serialized nodes.

    The values are part of the JSON wire format and must never change once
    released, otherwise previously persisted queries stop deserializing.

    Categories:
    - Sources: TABLE, JOIN
    - Queries: SELECT_QUERY
    - Conditions: one member per predicate variant
    - Mutations: DELETE_MUTATION, UPDATE_MUTATION, INSERT_MUTATION
    """

    # Sources
    TABLE = "Table"
    JOIN = "Join"

    # Queries
    SELECT_QUERY = "SelectQuery"

    # Conditions
    EQUAL = "EqualCondition"
    NOT_EQUAL = "NotEqualCondition"
    GREATER_THAN = "GreaterThanCondition"
    LESS_THAN = "LessThanCondition"
    BETWEEN = "BetweenCondition"
    IN = "InCondition"
    LIKE = "LikeCondition"
    NOT_LIKE = "NotLikeCondition"
    NULL = "NullCondition"
    NOT_NULL = "NotNullCondition"
    COLUMN_EQUAL = "ColumnEqualCondition"
    AND = "AndCondition"
    OR = "OrCondition"

    # Mutations
    DELETE_MUTATION = "DeleteMutation"
    UPDATE_MUTATION = "UpdateMutation"
    INSERT_MUTATION = "InsertMutation"


class JoinType(str, Enum):
    """Join kinds supported by ``QueryBase.join``."""

    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"
    FULL = "FULL"


class UnionType(str, Enum):
    """Set operators used to compose select queries."""

    UNION = "UNION"
    UNION_ALL = "UNION ALL"


class OrderDirection(str, Enum):
    """Sort direction of an ORDER BY entry."""

    ASC = "ASC"
    DESC = "DESC"
