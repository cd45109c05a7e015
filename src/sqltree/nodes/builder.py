"""Node builder for reconstructing AST nodes from JSON.

This module provides the registry that maps every ``NodeType`` tag to the
node class that decodes it. It is the single deserialization entry point
for payloads whose node type is not known in advance.
"""

import json
from typing import Any, Dict, Type

from sqltree.common.exceptions import parse_error, unknown_type_error
from sqltree.constants.sql import NodeType
from sqltree.logging import get_logger
from sqltree.nodes.base import SQLNode
from sqltree.nodes.conditions import (
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
)
from sqltree.nodes.mutations import DeleteMutation, InsertMutation, UpdateMutation
from sqltree.nodes.query import Join, SelectQuery, Table
from sqltree.utils.decorators import traced

logger = get_logger(__name__)


class NodeBuilder:
    """Builder for creating node instances from serialized data.

    Example:
        >>> node = NodeBuilder.deserialize('{"type": "Table", "source": "users"}')
        >>> node.to_sql()
        '`users`'
    """

    # Registry mapping NodeType to node class; one entry per tag
    _registry: Dict[NodeType, Type[SQLNode]] = {
        NodeType.TABLE: Table,
        NodeType.JOIN: Join,
        NodeType.SELECT_QUERY: SelectQuery,
        NodeType.EQUAL: EqualCondition,
        NodeType.NOT_EQUAL: NotEqualCondition,
        NodeType.GREATER_THAN: GreaterThanCondition,
        NodeType.LESS_THAN: LessThanCondition,
        NodeType.BETWEEN: BetweenCondition,
        NodeType.IN: InCondition,
        NodeType.LIKE: LikeCondition,
        NodeType.NOT_LIKE: NotLikeCondition,
        NodeType.NULL: NullCondition,
        NodeType.NOT_NULL: NotNullCondition,
        NodeType.COLUMN_EQUAL: ColumnEqualCondition,
        NodeType.AND: AndCondition,
        NodeType.OR: OrCondition,
        NodeType.DELETE_MUTATION: DeleteMutation,
        NodeType.UPDATE_MUTATION: UpdateMutation,
        NodeType.INSERT_MUTATION: InsertMutation,
    }

    @classmethod
    def registered_types(cls) -> Dict[NodeType, Type[SQLNode]]:
        return dict(cls._registry)

    @classmethod
    def create_node_from_dict(cls, node_dict: Any) -> SQLNode:
        """Create a node instance from its ``to_json`` representation.

        Args:
            node_dict: Decoded JSON object carrying a ``type`` tag

        Returns:
            The reconstructed node

        Raises:
            SQLTreeError: UNKNOWN_NODE_TYPE for a missing or unregistered tag,
                PARSE_ERROR if the payload does not validate.
        """
        if not isinstance(node_dict, dict):
            raise parse_error(TypeError(f"expected a JSON object, got {type(node_dict).__name__}"))

        type_value = node_dict.get("type")
        try:
            node_type = NodeType(type_value)
        except ValueError:
            raise unknown_type_error(type_value) from None

        node_class = cls._registry.get(node_type)
        if node_class is None:
            raise unknown_type_error(type_value)

        return node_class.from_json(node_dict)

    @classmethod
    @traced("sqltree.deserialize")
    def deserialize(cls, text: str) -> SQLNode:
        """Decode JSON text and reconstruct the node it describes.

        Raises:
            SQLTreeError: PARSE_ERROR for malformed JSON (the message carries
                the decoder's reason), UNKNOWN_NODE_TYPE for an unknown tag.
        """
        try:
            node_dict = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            raise parse_error(e, text if isinstance(text, str) else None) from e

        node = cls.create_node_from_dict(node_dict)
        logger.debug("Deserialized %s node", node_dict.get("type"))
        return node


def deserialize(text: str) -> SQLNode:
    """Deserialize any node from JSON text. See ``NodeBuilder.deserialize``."""
    return NodeBuilder.deserialize(text)
