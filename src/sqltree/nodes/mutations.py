"""Data Manipulation Language (DML) mutation nodes.

This module contains the DELETE, UPDATE and INSERT statements. They share
the table and condition vocabulary of SelectQuery and follow the same
immutable builder protocol.
"""

from typing import Dict, List, Literal, Mapping, Optional, Sequence, Tuple

from pydantic import Field
from typing_extensions import Self

from sqltree.common.exceptions import validation_error
from sqltree.flavors import Flavor
from sqltree.nodes.base import SQLNode
from sqltree.nodes.conditions import AnyCondition, Condition, Scalar
from sqltree.nodes.query import QueryBase, SelectQuery


class _FilteredMutation(QueryBase):
    where_conditions: Tuple[AnyCondition, ...] = Field(default=(), alias="where")

    def where(self, condition: Condition) -> Self:
        """Append a WHERE condition; multiple conditions are AND-ed."""
        return self._replace(where_conditions=self.where_conditions + (condition,))

    def _render_where(self, flavor: Flavor) -> str:
        if not self.where_conditions:
            return ""
        return " WHERE " + " AND ".join(c._render(flavor) for c in self.where_conditions)


class DeleteMutation(_FilteredMutation):
    """DELETE statement.

    Without joins: ``DELETE FROM <table> [WHERE ...]``. With joins the
    multi-table form ``DELETE <target> FROM <table> <joins> [WHERE ...]`` is
    used, where the target is the primary table's alias or name.
    """
    type: Literal["DeleteMutation"] = "DeleteMutation"

    def _render(self, flavor: Flavor) -> str:
        table = self.table
        if self.joins:
            target = (
                flavor.escape_column(table.alias)
                if table.alias
                else flavor.escape_table(table.get_table_name())
            )
            sql = f"DELETE {target} FROM {table._render(flavor)} {self._render_joins(flavor)}"
        else:
            sql = f"DELETE FROM {table._render(flavor)}"
        return sql + self._render_where(flavor)


class UpdateMutation(_FilteredMutation):
    """UPDATE statement: ``UPDATE <table> [<joins>] SET c = v, ... [WHERE ...]``."""
    type: Literal["UpdateMutation"] = "UpdateMutation"
    assignments: Dict[str, Scalar] = Field(default_factory=dict, alias="values")

    def set(self, column: str, value: Scalar) -> Self:
        """Assign a literal value to a column, replacing an earlier assignment."""
        return self.set_values({column: value})

    def set_values(self, values: Mapping[str, Scalar]) -> Self:
        """Merge several assignments, keeping first-assignment order."""
        return self._replace(assignments={**self.assignments, **values})

    def _render(self, flavor: Flavor) -> str:
        if not self.assignments:
            raise validation_error(
                f"Update of '{self.table.get_table_name()}' has no values to set",
                field="values",
            )
        sql = f"UPDATE {self.table._render(flavor)}"
        if self.joins:
            sql += f" {self._render_joins(flavor)}"
        sql += " SET " + ", ".join(
            f"{flavor.escape_column(column)} = {flavor.escape_value(value)}"
            for column, value in self.assignments.items()
        )
        return sql + self._render_where(flavor)


class InsertMutation(SQLNode):
    """INSERT statement.

    Rows are column-to-value mappings. The column list is either given
    explicitly with ``columns`` or collected from the rows in first-seen
    order; a row missing a column inserts NULL for it. Alternatively a
    select query can provide the rows (``INSERT ... SELECT``).
    """
    type: Literal["InsertMutation"] = "InsertMutation"
    table_name: str = Field(alias="table")
    column_names: Optional[Tuple[str, ...]] = Field(default=None, alias="columns")
    rows: Tuple[Dict[str, Scalar], ...] = Field(default=(), alias="values")
    source_query: Optional[SelectQuery] = Field(default=None, alias="query")

    def values(self, rows: Sequence[Mapping[str, Scalar]]) -> Self:
        """Replace the rows (and drop any source query)."""
        return self._replace(rows=tuple(dict(row) for row in rows), source_query=None)

    def add_values(self, *rows: Mapping[str, Scalar]) -> Self:
        """Append one or more rows (and drop any source query)."""
        return self._replace(rows=self.rows + tuple(dict(row) for row in rows), source_query=None)

    def columns(self, names: Sequence[str]) -> Self:
        """Fix the column list and its order; an empty list restores the default."""
        if isinstance(names, str):
            names = [names]
        return self._replace(column_names=tuple(names) or None)

    def select(self, query: SelectQuery) -> Self:
        """Insert the result of ``query`` instead of literal rows."""
        return self._replace(source_query=query.clone(), rows=())

    def get_columns(self) -> List[str]:
        if self.column_names:
            return list(self.column_names)
        names: Dict[str, None] = {}
        for row in self.rows:
            names.update(dict.fromkeys(row))
        return list(names)

    def get_table_names(self) -> List[str]:
        names = [self.table_name]
        if self.source_query is not None:
            names.extend(self.source_query.get_table_names())
        return list(dict.fromkeys(names))

    def _render(self, flavor: Flavor) -> str:
        sql = f"INSERT INTO {flavor.escape_table(self.table_name)}"
        columns = self.get_columns()

        if self.source_query is not None:
            if self.column_names:
                sql += " (" + ", ".join(flavor.escape_column(c) for c in columns) + ")"
            return f"{sql} {self.source_query._render(flavor)}"

        if not self.rows or not columns:
            raise validation_error(
                f"Insert into '{self.table_name}' requires values or a source query",
                field="values",
            )
        sql += " (" + ", ".join(flavor.escape_column(c) for c in columns) + ")"
        sql += " VALUES " + ", ".join(
            "(" + flavor.format_value_list([row.get(c) for c in columns]) + ")"
            for row in self.rows
        )
        return sql
