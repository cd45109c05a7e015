"""Constants module for sqltree.

This module contains all constant values and enumerations used throughout
the package. As Layer 0 in the architecture, this module has no dependencies
on other sqltree modules.

Organization:
    - sql: node type tags and SQL keyword vocabularies
"""

from sqltree.constants.sql import (
    JoinType,
    NodeType,
    OrderDirection,
    UnionType,
)

__all__ = [
    "JoinType",
    "NodeType",
    "OrderDirection",
    "UnionType",
]
