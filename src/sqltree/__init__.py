from sqltree.__version__ import __version__

from sqltree.api import (
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
from sqltree.nodes import (
    # Conditions
    C,
    Conditions,
    Condition,
    AndCondition,
    BetweenCondition,
    ColumnEqualCondition,
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
    # Queries and mutations
    SQLNode,
    Table,
    Join,
    SelectQuery,
    DeleteMutation,
    UpdateMutation,
    InsertMutation,
    NodeBuilder,
)
from sqltree.functions import Fn, Function
from sqltree.flavors import (
    Flavor,
    MySQLFlavor,
    AWSTimestreamFlavor,
    flavors,
    get_flavor,
    register_flavor,
)
from sqltree.constants import JoinType, NodeType, OrderDirection, UnionType

from sqltree.common.exceptions import SQLTreeError, ErrorCode
from sqltree.settings import get_settings, reload_settings
from sqltree.logging import setup_logging


__all__ = [
    "__version__",

    # Entry points
    "Q",
    "Query",
    "delete",
    "deserialize",
    "insert",
    "select",
    "stats",
    "table",
    "update",

    # Conditions
    "C",
    "Conditions",
    "Condition",
    "AndCondition",
    "BetweenCondition",
    "ColumnEqualCondition",
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

    # Nodes
    "SQLNode",
    "Table",
    "Join",
    "SelectQuery",
    "DeleteMutation",
    "UpdateMutation",
    "InsertMutation",
    "NodeBuilder",

    # Functions
    "Fn",
    "Function",

    # Flavors
    "Flavor",
    "MySQLFlavor",
    "AWSTimestreamFlavor",
    "flavors",
    "get_flavor",
    "register_flavor",

    # Constants
    "JoinType",
    "NodeType",
    "OrderDirection",
    "UnionType",

    # Exceptions (public API)
    "SQLTreeError",
    "ErrorCode",

    # Configuration
    "get_settings",
    "reload_settings",
    "setup_logging",
]
