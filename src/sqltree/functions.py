"""SQL function fragment generators.

Each helper returns raw SQL text meant to be used as a select field or a
column argument. Arguments are inserted verbatim; the output is opaque to
the rest of the library and flavors pass it through unchanged because it
contains parentheses.

Example:
    >>> select().from_("sales").add_field(Fn.sum("amount"), "total").to_sql()
    'SELECT SUM(amount) AS `total` FROM `sales`'
"""

from datetime import date, datetime
from typing import Literal, Union

from sqltree.common.exceptions import validation_error

DateLike = Union[date, datetime, str]


def _format_day(value: DateLike) -> str:
    """Return ``value`` as ``YYYY-MM-DD``."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    try:
        return datetime.fromisoformat(value).date().isoformat()
    except (TypeError, ValueError) as e:
        raise validation_error(
            f"Cannot interpret {value!r} as a date",
            field="date",
            value=value,
            cause=e,
        ) from e


class Function:
    """Namespace of SQL fragment helpers (aliased as ``Fn``)."""

    @staticmethod
    def sum(column: str) -> str:
        return f"SUM({column})"

    @staticmethod
    def min(column: str) -> str:
        return f"MIN({column})"

    @staticmethod
    def max(column: str) -> str:
        return f"MAX({column})"

    @staticmethod
    def count(column: str = "*") -> str:
        return f"COUNT({column})"

    @staticmethod
    def avg(column: str) -> str:
        return f"AVG({column})"

    @staticmethod
    def year(column: str) -> str:
        return f"YEAR({column})"

    @staticmethod
    def month(column: str) -> str:
        return f"MONTH({column})"

    @staticmethod
    def date_diff(interval: Literal["year", "month", "day"], date1: str, date2: str) -> str:
        """Difference between two date expressions in whole ``interval`` units.

        Any interval other than ``month`` or ``day`` is treated as ``year``.
        """
        if interval == "month":
            return f"TIMESTAMPDIFF(MONTH,{date1}, {date2})"
        if interval == "day":
            return f"DATEDIFF({date1}, {date2})"
        return f"YEAR({date1}) - YEAR({date2})"

    @staticmethod
    def format_date(value: DateLike) -> str:
        """Quoted ``'YYYY-MM-DD'`` literal."""
        return f"'{_format_day(value)}'"

    @staticmethod
    def string(value: str) -> str:
        """Wrap ``value`` in single quotes without escaping."""
        return f"'{value}'"

    @staticmethod
    def concat(*values: str) -> str:
        return f"CONCAT({','.join(values)})"

    @staticmethod
    def date_range_sum_field(
        date_column: str,
        value_column: str,
        start: DateLike,
        end: DateLike,
    ) -> str:
        """Sum ``value_column`` over rows whose ``date_column`` is in [start, end]."""
        return (
            f"SUM(IF({date_column} BETWEEN '{_format_day(start)}' AND "
            f"'{_format_day(end)}',{value_column},0))"
        )

    @staticmethod
    def price_current_and_previous_diff_field(this_year_column: str, last_year_column: str) -> str:
        """Relative change between two yearly values.

        Yields 0 when both are zero, NULL when only last year is zero and -1
        when only this year is zero.
        """
        return (
            "CASE "
            f"WHEN {this_year_column} = 0 AND {last_year_column} = 0 THEN 0 "
            f"WHEN {last_year_column} = 0 THEN null "
            f"WHEN {this_year_column} = 0 THEN -1 "
            f"ELSE ({this_year_column} - {last_year_column}) / {last_year_column} "
            "END"
        )


Fn = Function

__all__ = ["Function", "Fn"]
