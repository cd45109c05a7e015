"""Utility functions and helpers for sqltree."""

from sqltree.utils.decorators import traced

__all__ = [
    "traced",
]
