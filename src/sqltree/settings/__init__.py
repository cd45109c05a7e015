"""Settings module providing configuration management for sqltree.

Built on Pydantic Settings. Every value can be overridden through an
environment variable named ``SQLTREE_<SETTING_NAME>`` or a ``.env`` file.

Configuration Sources (precedence order):
    1. Environment Variables (highest priority)
    2. ``.env`` file
    3. Default Values in code (lowest priority)

Quick Start:
    >>> from sqltree.settings import get_settings
    >>> settings = get_settings()
    >>> settings.default_flavor
    'mysql'
"""

from .main import SQLTreeSettings, get_settings, reload_settings
from .base import SQLTreeBaseSettings

__all__ = [
    "SQLTreeBaseSettings",
    "SQLTreeSettings",
    "get_settings",
    "reload_settings",
]
