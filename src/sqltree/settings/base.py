import re

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SQLTreeBaseSettings(BaseSettings):
    """Base settings class shared by all sqltree settings.

    Values are read from ``SQLTREE_``-prefixed environment variables and an
    optional ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="SQLTREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    app_env: str = Field(
        default="dev",
        description="Application deployment environment (e.g., dev, qa, prod). Attached to log records."
    )

    log_level: str = Field(
        default="INFO",
        description="Log level used by setup_logging when none is given explicitly"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level '{v}'")
        return level
