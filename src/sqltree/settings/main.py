from typing import Optional

from pydantic import Field, ValidationError, field_validator

from sqltree.common.exceptions import configuration_error
from .base import SQLTreeBaseSettings


class SQLTreeSettings(SQLTreeBaseSettings):
    """Rendering defaults for sqltree.

    Example:
        ```python
        # SQLTREE_DEFAULT_FLAVOR=aws_timestream
        settings = get_settings()
        settings.default_flavor  # "aws_timestream"
        ```
    """

    default_flavor: str = Field(
        default="mysql",
        description="Name of the registered flavor used when to_sql() receives no flavor"
    )
    subquery_alias: str = Field(
        default="t",
        description="Alias synthesized for nested-query table sources that have none"
    )

    @field_validator("subquery_alias")
    @classmethod
    def validate_subquery_alias(cls, v: str) -> str:
        """The synthesized alias must be a plain identifier."""
        if not v or not v.replace("_", "").isalnum() or v[0].isdigit():
            raise ValueError(
                f"Invalid subquery alias '{v}'. "
                "Aliases must be alphanumeric with optional underscores and not start with a digit."
            )
        return v


_settings: Optional[SQLTreeSettings] = None


def get_settings() -> SQLTreeSettings:
    """Return the process-wide settings instance, loading it on first use.

    Raises:
        SQLTreeError: With CONFIG_ERROR if the environment holds invalid values.
    """
    global _settings
    if _settings is None:
        _settings = _load_settings()
    return _settings


def reload_settings() -> SQLTreeSettings:
    """Force a reload of the settings from the environment."""
    global _settings
    _settings = _load_settings()
    return _settings


def _load_settings() -> SQLTreeSettings:
    try:
        return SQLTreeSettings()
    except ValidationError as e:
        raise configuration_error(
            f"Invalid sqltree configuration: {e}",
            cause=e,
        ) from e
