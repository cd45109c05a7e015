from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(Enum):
    """Standard error codes for sqltree operations.

    This enum provides categorized error codes that can be used
    to identify error types without creating numerous exception classes.

    Attributes:
        CONFIG_*: Configuration and flavor lookup errors
        VALIDATION_*: Invalid builder arguments
        STRUCTURE_*: Accessing parts of a query that do not exist
        SERIALIZATION_*: JSON decoding and node dispatch errors
    """
    # Configuration errors
    CONFIG_ERROR = "CONFIG_001"
    FLAVOR_NOT_FOUND = "CONFIG_002"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_001"

    # Structural errors
    NO_TABLE_DEFINED = "STRUCTURE_001"

    # Serialization errors
    UNKNOWN_NODE_TYPE = "SERIALIZATION_001"
    PARSE_ERROR = "SERIALIZATION_002"


class SQLTreeError(Exception):
    """Base exception for all sqltree errors.

    A single exception class categorized by error code. All of these are
    programmer-facing errors: they are raised synchronously to the caller
    and never retried internally.

    Attributes:
        message: Error message
        error_code: Error code from ErrorCode enum
        details: Additional error details
        cause: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

        # Lazy import to avoid circular dependency
        from sqltree.logging import get_logger
        logger = get_logger(__name__)
        logger.debug(
            message,
            extra={
                "error_code": error_code.value,
                "details": self.details,
            },
            exc_info=cause is not None,
        )

    def __str__(self) -> str:
        msg = f"[{self.error_code.value}] {self.message}"
        if self.cause:
            msg = f"{msg} (caused by: {type(self.cause).__name__}: {str(self.cause)})"
        return msg

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
        }

    @classmethod
    def from_error_code(
        cls,
        error_code: ErrorCode,
        message: str,
        **kwargs
    ) -> "SQLTreeError":
        """Create exception from error code.

        Args:
            error_code: Error code
            message: Error message
            **kwargs: Additional arguments for SQLTreeError

        Returns:
            SQLTreeError instance
        """
        return cls(message=message, error_code=error_code, **kwargs)


# Helper functions for common error scenarios
def configuration_error(
    message: str,
    config_key: Optional[str] = None,
    **kwargs
) -> SQLTreeError:
    """Create a configuration error.

    Args:
        message: Error message
        config_key: Configuration key that caused the error
        **kwargs: Additional error details

    Returns:
        SQLTreeError with CONFIG_ERROR code
    """
    details = kwargs.get('details', {})
    if config_key:
        details["config_key"] = config_key

    return SQLTreeError(
        message=message,
        error_code=ErrorCode.CONFIG_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def validation_error(
    message: str,
    field: Optional[str] = None,
    value: Any = None,
    **kwargs
) -> SQLTreeError:
    """Create a validation error.

    Args:
        message: Error message
        field: Field that failed validation
        value: Invalid value
        **kwargs: Additional error details

    Returns:
        SQLTreeError with VALIDATION_ERROR code
    """
    details = kwargs.get('details', {})
    if field:
        details["field"] = field
    if value is not None:
        details["value"] = str(value)

    return SQLTreeError(
        message=message,
        error_code=ErrorCode.VALIDATION_ERROR,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def no_table_error(node: Optional[str] = None) -> SQLTreeError:
    """Create the error raised when a query has no primary table.

    Args:
        node: Name of the node class that was asked for its table
    """
    details = {"node": node} if node else {}
    return SQLTreeError(
        message="No table defined",
        error_code=ErrorCode.NO_TABLE_DEFINED,
        details=details,
    )


def unknown_type_error(type_tag: Any, **kwargs) -> SQLTreeError:
    """Create a deserialization-shape error for an unrecognized ``type`` tag.

    Args:
        type_tag: The discriminator found in the payload (may be None)
    """
    details = kwargs.get('details', {})
    details["type"] = str(type_tag)

    return SQLTreeError(
        message=f"Unknown node type: {type_tag!r}",
        error_code=ErrorCode.UNKNOWN_NODE_TYPE,
        details=details,
        **{k: v for k, v in kwargs.items() if k != 'details'}
    )


def parse_error(
    original_error: Exception,
    text: Optional[str] = None,
    **kwargs
) -> SQLTreeError:
    """Create a parse error wrapping the underlying decoding failure.

    Args:
        original_error: The exception raised while decoding or validating
        text: Input text that failed (truncated in details)
        **kwargs: Additional error details

    Returns:
        SQLTreeError with PARSE_ERROR code
    """
    details = kwargs.get('details', {})
    if text is not None:
        details["text"] = text[:500] + "..." if len(text) > 500 else text

    return SQLTreeError(
        message=f"Error parsing query: {str(original_error)}",
        error_code=ErrorCode.PARSE_ERROR,
        details=details,
        cause=original_error,
        **{k: v for k, v in kwargs.items() if k not in ['details', 'cause']}
    )


def flavor_not_found_error(name: str, available: Optional[list] = None) -> SQLTreeError:
    """Create an error for an unregistered flavor name.

    Args:
        name: Requested flavor name
        available: Names currently registered
    """
    details: Dict[str, Any] = {"flavor": name}
    if available is not None:
        details["available"] = sorted(available)

    return SQLTreeError(
        message=f"Flavor '{name}' is not registered",
        error_code=ErrorCode.FLAVOR_NOT_FOUND,
        details=details,
    )
