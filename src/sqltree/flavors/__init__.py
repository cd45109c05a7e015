"""SQL dialect strategies ("flavors").

Architecture:
    - base.py: Abstract Flavor contract with standard literal quoting
    - mysql.py: Backtick-quoting MySQL flavor
    - timestream.py: Double-quote Amazon Timestream flavor
    - factory.py: Name registry and flavor resolution

Example:
    >>> from sqltree.flavors import get_flavor
    >>> get_flavor("mysql").escape_column("users.id")
    '`users`.`id`'
"""

from sqltree.flavors.base import Flavor
from sqltree.flavors.mysql import MySQLFlavor
from sqltree.flavors.timestream import AWSTimestreamFlavor
from sqltree.flavors.factory import (
    FlavorLike,
    flavors,
    get_flavor,
    register_flavor,
)

__all__ = [
    "Flavor",
    "FlavorLike",
    "MySQLFlavor",
    "AWSTimestreamFlavor",
    "flavors",
    "get_flavor",
    "register_flavor",
]
