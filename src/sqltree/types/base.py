"""Base model class for all sqltree models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class SQLTreeBaseModel(BaseModel):
    """Base model for all sqltree value objects.

    Provides common functionality for all sqltree models including:
    - Immutability (``frozen=True``); changes always produce new instances
    - Population by field name or by camelCase wire alias
    - Serialization to dictionary via to_dict()
    """
    model_config = ConfigDict(
        frozen=True,
        use_enum_values=True,
        populate_by_name=True,
        arbitrary_types_allowed=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to a JSON-compatible dictionary.

        Keys use the wire aliases and unset optional values are omitted.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
