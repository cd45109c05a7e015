"""AST node definitions.

Architecture:
    - base.py: SQLNode, rendering and (de)serialization shared by all nodes
    - conditions.py: predicate variants and the Conditions constructors
    - query.py: Table, Join, QueryBase, SelectQuery
    - mutations.py: DeleteMutation, UpdateMutation, InsertMutation
    - builder.py: NodeBuilder registry and the deserialize dispatcher
"""

from sqltree.nodes.base import SQLNode
from sqltree.nodes.conditions import (
    AndCondition,
    AnyCondition,
    BetweenCondition,
    C,
    ColumnEqualCondition,
    Condition,
    Conditions,
    EqualCondition,
    GreaterThanCondition,
    InCondition,
    LessThanCondition,
    LikeCondition,
    NotEqualCondition,
    NotLikeCondition,
    NotNullCondition,
    NullCondition,
    OrCondition,
    Scalar,
)
from sqltree.nodes.query import (
    Join,
    OrderSpec,
    QueryBase,
    SelectBaseQuery,
    SelectField,
    SelectQuery,
    Table,
    UnionPart,
)
from sqltree.nodes.mutations import DeleteMutation, InsertMutation, UpdateMutation
from sqltree.nodes.builder import NodeBuilder, deserialize

__all__ = [
    "SQLNode",
    # Conditions
    "AndCondition",
    "AnyCondition",
    "BetweenCondition",
    "C",
    "ColumnEqualCondition",
    "Condition",
    "Conditions",
    "EqualCondition",
    "GreaterThanCondition",
    "InCondition",
    "LessThanCondition",
    "LikeCondition",
    "NotEqualCondition",
    "NotLikeCondition",
    "NotNullCondition",
    "NullCondition",
    "OrCondition",
    "Scalar",
    # Queries
    "Join",
    "OrderSpec",
    "QueryBase",
    "SelectBaseQuery",
    "SelectField",
    "SelectQuery",
    "Table",
    "UnionPart",
    # Mutations
    "DeleteMutation",
    "InsertMutation",
    "UpdateMutation",
    # Deserialization
    "NodeBuilder",
    "deserialize",
]
