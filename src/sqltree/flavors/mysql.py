"""MySQL flavor."""

from sqltree.flavors.base import Flavor


class MySQLFlavor(Flavor):
    """Flavor for MySQL and MariaDB.

    Identifiers are quoted with backticks (``db.table`` becomes
    `` `db`.`table` ``). String literals also escape backslashes, since
    MySQL treats them as escape characters unless NO_BACKSLASH_ESCAPES is set.
    """

    name = "mysql"
    quote_char = "`"

    def escape_column(self, name: str) -> str:
        return self._escape_dotted(name)

    def escape_table(self, name: str) -> str:
        return self._escape_dotted(name)

    def quote_string(self, value: str) -> str:
        escaped = value.replace("\\", "\\\\").replace("'", "''")
        return f"'{escaped}'"
