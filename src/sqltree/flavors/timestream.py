"""Amazon Timestream flavor."""

from sqltree.flavors.base import Flavor


class AWSTimestreamFlavor(Flavor):
    """Flavor for Amazon Timestream's SQL dialect.

    Timestream addresses tables as ``"database"."table"`` and follows ANSI
    double-quote identifier quoting. Boolean literals are lower case.
    """

    name = "aws_timestream"
    quote_char = '"'

    def escape_column(self, name: str) -> str:
        return self._escape_dotted(name)

    def escape_table(self, name: str) -> str:
        return self._escape_dotted(name)

    def format_bool(self, value: bool) -> str:
        return "true" if value else "false"
