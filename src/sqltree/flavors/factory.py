"""Flavor registry.

Maps short names to shared flavor instances. Rendering entry points accept a
flavor instance, a registered name, or ``None`` for the configured default.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from sqltree.common.exceptions import flavor_not_found_error, validation_error
from sqltree.flavors.base import Flavor
from sqltree.flavors.mysql import MySQLFlavor
from sqltree.flavors.timestream import AWSTimestreamFlavor
from sqltree.logging import get_logger

logger = get_logger(__name__)

FlavorLike = Union[Flavor, str, None]

_registry: Dict[str, Flavor] = {
    MySQLFlavor.name: MySQLFlavor(),
    AWSTimestreamFlavor.name: AWSTimestreamFlavor(),
}

#: Read-only view of the registered flavors.
flavors: Mapping[str, Flavor] = MappingProxyType(_registry)


def register_flavor(name: str, flavor: Flavor) -> None:
    """Register (or replace) a flavor under a short name.

    Args:
        name: Lookup name, e.g. ``"postgres"``
        flavor: Stateless flavor instance

    Example:
        >>> register_flavor("ansi", MyAnsiFlavor())
        >>> select().from_("t").to_sql("ansi")
    """
    if not isinstance(flavor, Flavor):
        raise validation_error(
            f"Cannot register {type(flavor).__name__} as a flavor",
            field="flavor",
        )
    if name in _registry:
        logger.info("Replacing registered flavor %s", name)
    _registry[name] = flavor


def get_flavor(flavor: FlavorLike = None) -> Flavor:
    """Resolve a flavor argument to a flavor instance.

    Args:
        flavor: A Flavor instance (returned as is), a registered name, or
            None for ``settings.default_flavor``.

    Raises:
        SQLTreeError: With FLAVOR_NOT_FOUND for an unknown name.
    """
    if isinstance(flavor, Flavor):
        return flavor

    name: Optional[str] = flavor
    if name is None:
        from sqltree.settings import get_settings
        name = get_settings().default_flavor

    try:
        return _registry[name]
    except KeyError:
        raise flavor_not_found_error(name, list(_registry)) from None
