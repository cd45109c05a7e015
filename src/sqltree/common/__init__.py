"""Common exceptions for sqltree.

Exception Design:
    The exception system uses error codes for categorization rather than
    numerous specific exception classes. All errors are SQLTreeError
    instances carrying an ErrorCode and structured details.
"""

from sqltree.common.exceptions import (
    SQLTreeError,
    ErrorCode,
    # Helper functions
    configuration_error,
    validation_error,
    no_table_error,
    unknown_type_error,
    parse_error,
    flavor_not_found_error,
)

__all__ = [
    # Base Exception and Error Codes
    "SQLTreeError",
    "ErrorCode",
    # Helper functions
    "configuration_error",
    "validation_error",
    "no_table_error",
    "unknown_type_error",
    "parse_error",
    "flavor_not_found_error",
]
