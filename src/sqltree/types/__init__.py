from sqltree.types.base import SQLTreeBaseModel

__all__ = [
    "SQLTreeBaseModel",
]
