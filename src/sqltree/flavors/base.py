"""Flavor contract shared by all SQL dialects."""

import math
import re
from abc import ABC, abstractmethod
from typing import Any, List

from sqltree.common.exceptions import validation_error


class Flavor(ABC):
    """Base interface for SQL dialect strategies.

    A flavor decides how identifiers and literal values are written into
    generated SQL. The AST never interpolates an identifier directly; every
    column, alias and table name is passed through ``escape_column`` or
    ``escape_table``.

    Flavors must be stateless: a single instance is shared by every render
    call in the process.

    Raw expressions:
        Strings containing parentheses, string literals starting with a
        single quote and names already wrapped in the dialect's quote
        character are treated as pre-formatted SQL (for example the output
        of ``Fn.sum("price")``) and emitted verbatim. Anything else is an
        identifier: dotted names are quoted per part, embedded quote
        characters are doubled and ``*`` is never quoted.
    """

    #: Registry name of the flavor.
    name: str = ""

    #: Character used to delimit identifiers.
    quote_char: str = '"'

    _EXPRESSION_PATTERN = re.compile(r"[()]")

    @abstractmethod
    def escape_column(self, name: str) -> str:
        """Escape a column name, alias or column expression."""

    @abstractmethod
    def escape_table(self, name: str) -> str:
        """Escape a table reference given by name."""

    def escape_value(self, value: Any) -> str:
        """Format a scalar literal.

        Args:
            value: None, bool, int, float or str

        Returns:
            SQL literal text

        Raises:
            SQLTreeError: If the value is not a supported scalar
        """
        if value is None:
            return "NULL"
        if isinstance(value, bool):
            return self.format_bool(value)
        if isinstance(value, float) and not math.isfinite(value):
            raise validation_error(
                "Non-finite float literals have no SQL spelling",
                field="value",
                value=value,
            )
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            return self.quote_string(value)
        raise validation_error(
            f"Unsupported literal of type {type(value).__name__}",
            field="value",
            value=value,
        )

    def format_bool(self, value: bool) -> str:
        return "TRUE" if value else "FALSE"

    def quote_string(self, value: str) -> str:
        """Quote a string value, doubling embedded single quotes."""
        escaped = value.replace("'", "''")
        return f"'{escaped}'"

    def quote_identifier(self, identifier: str) -> str:
        """Wrap a single identifier part in the dialect's quote character."""
        q = self.quote_char
        return f"{q}{identifier.replace(q, q + q)}{q}"

    def format_value_list(self, values: List[Any]) -> str:
        """Format a list of literals as a comma separated list."""
        return ", ".join(self.escape_value(value) for value in values)

    def is_expression(self, name: str) -> bool:
        """Check whether a name is a raw SQL expression rather than an identifier."""
        if self._EXPRESSION_PATTERN.search(name) or name.startswith("'"):
            return True
        q = self.quote_char
        return len(name) >= 2 and name.startswith(q) and name.endswith(q)

    def _escape_dotted(self, name: str) -> str:
        if name == "*" or self.is_expression(name):
            return name
        return ".".join(
            part if part == "*" else self.quote_identifier(part)
            for part in name.split(".")
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
