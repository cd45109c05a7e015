"""Base node definitions.

Every AST node is an immutable pydantic model. Nodes are pure data that
describe WHAT statement to build; flavors decide how identifiers and literals
are spelled when the tree is rendered.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError
from typing_extensions import Self

from sqltree.common.exceptions import SQLTreeError, parse_error, unknown_type_error, validation_error
from sqltree.flavors import Flavor, FlavorLike, get_flavor
from sqltree.types.base import SQLTreeBaseModel
from sqltree.utils.decorators import traced

M = TypeVar("M", bound=BaseModel)


def build_model(model_class: Type[M], **data: Any) -> M:
    """Validate keyword data into ``model_class``.

    Raises:
        SQLTreeError: With VALIDATION_ERROR wrapping pydantic's report.
    """
    try:
        return model_class.model_validate(data)
    except ValidationError as e:
        raise validation_error(
            f"Invalid {model_class.__name__}: {e}",
            cause=e,
        ) from e


def decoding_error(error: ValidationError, text: Optional[str] = None) -> SQLTreeError:
    """Translate a validation failure raised while decoding a payload.

    An unrecognized or missing ``type`` tag at any depth maps to
    UNKNOWN_NODE_TYPE, like a bad tag at the top level. Everything else is
    PARSE_ERROR.
    """
    for detail in error.errors():
        if detail["type"] == "union_tag_invalid":
            return unknown_type_error(detail.get("ctx", {}).get("tag"), cause=error)
        if detail["type"] == "union_tag_not_found":
            return unknown_type_error(None, cause=error)
    return parse_error(error, text)


def _node_attributes(node: "SQLNode", flavor: FlavorLike = None) -> Dict[str, Any]:
    return {"sqltree.node": type(node).__name__}


class SQLNode(SQLTreeBaseModel, ABC):
    """Base class for all AST nodes.

    Provides rendering, JSON (de)serialization and structural cloning.
    Subclasses implement ``_render`` against an already resolved flavor.
    """

    @abstractmethod
    def _render(self, flavor: Flavor) -> str:
        """Render this node with a concrete flavor."""

    @traced("sqltree.to_sql", attribute_getter=_node_attributes)
    def to_sql(self, flavor: FlavorLike = None) -> str:
        """Render the node as SQL text.

        Args:
            flavor: Flavor instance, registered flavor name, or None for the
                configured default flavor.

        Returns:
            SQL string
        """
        return self._render(get_flavor(flavor))

    def clone(self) -> Self:
        """Return a deep, independent copy of this node."""
        return self.model_copy(deep=True)

    def _replace(self, **changes: Any) -> Self:
        """Return a new node of the same class with ``changes`` applied.

        The receiver's fields are re-validated into a fresh instance, so
        sequence fields are rebuilt and nothing mutable is shared with the
        receiver.
        """
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        return build_model(type(self), **data)

    # serialization
    def to_json(self) -> Dict[str, Any]:
        """Return the JSON-compatible representation tagged with ``type``."""
        return self.to_dict()

    def serialize(self) -> str:
        """Return the JSON text of this node."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_json(cls, data: Any) -> Self:
        """Reconstruct a node from its ``to_json`` output.

        Raises:
            SQLTreeError: With PARSE_ERROR if the payload does not describe
                this node type.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise decoding_error(e) from e

    @classmethod
    def deserialize(cls, text: str) -> Self:
        """Reconstruct a node from its ``serialize`` output.

        Raises:
            SQLTreeError: With PARSE_ERROR for malformed JSON or an invalid
                payload; the message carries the decoder's reason.
        """
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise decoding_error(e, text) from e
