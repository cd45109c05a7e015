"""Table, join and select query nodes.

Builder methods never modify the receiver. Each returns a new node, so a
shared base query can be branched freely:

    >>> base = select().from_("users")
    >>> active = base.where(C.equal("active", True))
    >>> admins = base.where(C.equal("role", "admin"))
    >>> base.to_sql()
    'SELECT * FROM `users`'
"""

from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple, Union

from pydantic import Field, NonNegativeInt
from typing_extensions import Self

from sqltree.common.exceptions import no_table_error
from sqltree.constants.sql import JoinType, OrderDirection, UnionType
from sqltree.flavors import Flavor
from sqltree.nodes.base import SQLNode, build_model
from sqltree.nodes.conditions import AnyCondition, Condition
from sqltree.types.base import SQLTreeBaseModel

TableSource = Union[str, "SelectQuery"]


class Table(SQLNode):
    """A relation referenced by name or by a nested select query.

    Attributes:
        source: Table name, or a SelectQuery rendered as a derived table
        alias: Optional alias. Nested queries without one get the
            ``subquery_alias`` setting so the SQL stays valid.
    """
    type: Literal["Table"] = "Table"
    source: Union[str, "SelectQuery"]
    alias: Optional[str] = None

    def get_table_name(self) -> str:
        """Name of the underlying table, recursing into nested queries."""
        if isinstance(self.source, str):
            return self.source
        return self.source.table.get_table_name()

    def _render(self, flavor: Flavor) -> str:
        alias = self.alias
        if isinstance(self.source, str):
            table_sql = flavor.escape_table(self.source)
        else:
            table_sql = f"({self.source._render(flavor)})"
            if not alias:
                from sqltree.settings import get_settings
                alias = get_settings().subquery_alias
        return f"{table_sql} AS {flavor.escape_column(alias)}" if alias else table_sql


def _as_table(table: Union[Table, str], alias: Optional[str] = None) -> Table:
    if isinstance(table, Table):
        return table
    return build_model(Table, source=table, alias=alias)


class Join(SQLNode):
    """A joined table with an optional ON condition.

    A join without a condition renders as an unconditional join.
    """
    type: Literal["Join"] = "Join"
    table: Table
    condition: Optional[AnyCondition] = None
    join_type: JoinType = Field(default=JoinType.INNER, alias="joinType")

    def get_table_name(self) -> str:
        return self.table.get_table_name()

    def _render(self, flavor: Flavor) -> str:
        sql = f"{JoinType(self.join_type).value} JOIN {self.table._render(flavor)}"
        if self.condition is not None:
            sql += f" ON {self.condition._render(flavor)}"
        return sql


class QueryBase(SQLNode):
    """Table and join handling shared by select queries and mutations."""

    tables: Tuple[Table, ...] = ()
    joins: Tuple[Join, ...] = ()

    @property
    def table(self) -> Table:
        """The primary (first) table.

        Raises:
            SQLTreeError: With NO_TABLE_DEFINED if no table was set.
        """
        if not self.tables:
            raise no_table_error(type(self).__name__)
        return self.tables[0]

    def from_(self, source: TableSource, alias: Optional[str] = None) -> Self:
        """Replace the table list with a single table.

        Args:
            source: Table name or nested SelectQuery (copied into the table)
            alias: Optional table alias
        """
        if isinstance(source, SelectQuery):
            source = source.clone()
        return self._replace(tables=(build_model(Table, source=source, alias=alias),))

    def get_table_names(self) -> List[str]:
        return [t.get_table_name() for t in self.tables] + [j.get_table_name() for j in self.joins]

    def join(
        self,
        table: Union[Table, str],
        condition: Optional[Condition] = None,
        join_type: Union[JoinType, str] = JoinType.INNER,
    ) -> Self:
        """Append a join of any kind (INNER by default)."""
        join = build_model(Join, table=_as_table(table), condition=condition, join_type=join_type)
        return self._replace(joins=self.joins + (join,))

    def inner_join(self, table: Union[Table, str], condition: Optional[Condition] = None) -> Self:
        return self.join(table, condition, JoinType.INNER)

    def left_join(self, table: Union[Table, str], condition: Optional[Condition] = None) -> Self:
        return self.join(table, condition, JoinType.LEFT)

    def right_join(self, table: Union[Table, str], condition: Optional[Condition] = None) -> Self:
        return self.join(table, condition, JoinType.RIGHT)

    def full_join(self, table: Union[Table, str], condition: Optional[Condition] = None) -> Self:
        return self.join(table, condition, JoinType.FULL)

    def _render_from(self, flavor: Flavor) -> str:
        if not self.tables:
            return ""
        return "FROM " + ", ".join(t._render(flavor) for t in self.tables)

    def _render_joins(self, flavor: Flavor) -> str:
        return " ".join(j._render(flavor) for j in self.joins)


class SelectField(SQLTreeBaseModel):
    """A projected column or expression with an optional alias."""
    name: str
    alias: Optional[str] = None


class OrderSpec(SQLTreeBaseModel):
    field: str
    direction: OrderDirection = OrderDirection.ASC


class UnionPart(SQLTreeBaseModel):
    union_type: UnionType = Field(default=UnionType.UNION, alias="type")
    query: "SelectQuery"


FieldLike = Union[SelectField, Dict[str, Any], str]


def _as_field(field: FieldLike) -> SelectField:
    if isinstance(field, SelectField):
        return field
    if isinstance(field, str):
        return build_model(SelectField, name=field)
    return build_model(SelectField, **field)


class SelectBaseQuery(QueryBase):
    """Projection handling. An empty field list selects all columns."""

    select_fields: Tuple[SelectField, ...] = Field(default=(), alias="fields")

    def field(self, name: str, alias: Optional[str] = None) -> Self:
        """Deprecated: use ``add_field``."""
        return self.add_field(name, alias)

    def add_field(self, name: str, alias: Optional[str] = None) -> Self:
        return self.add_fields([build_model(SelectField, name=name, alias=alias)])

    def add_fields(self, fields: Sequence[FieldLike]) -> Self:
        """Append fields, keeping order and duplicates."""
        return self._replace(select_fields=self.select_fields + tuple(_as_field(f) for f in fields))

    def fields(self, fields: Sequence[FieldLike]) -> Self:
        """Replace the field list; an empty list selects all columns."""
        return self._replace(select_fields=tuple(_as_field(f) for f in fields))

    def remove_fields(self) -> Self:
        return self.fields([])

    def get_fields(self) -> Tuple[SelectField, ...]:
        return self.select_fields

    def _render(self, flavor: Flavor) -> str:
        if self.select_fields:
            columns = ", ".join(
                flavor.escape_column(f.name) + (f" AS {flavor.escape_column(f.alias)}" if f.alias else "")
                for f in self.select_fields
            )
        else:
            columns = "*"
        from_sql = self._render_from(flavor)
        return f"SELECT {columns} {from_sql}" if from_sql else f"SELECT {columns}"


class SelectQuery(SelectBaseQuery):
    """A SELECT statement.

    Clauses render in fixed order: SELECT, FROM, JOIN, WHERE, GROUP BY,
    HAVING, ORDER BY, LIMIT, OFFSET. Each union pair then wraps everything
    rendered so far: ``(<sql>) UNION (<other>)``.
    """
    type: Literal["SelectQuery"] = "SelectQuery"
    where_conditions: Tuple[AnyCondition, ...] = Field(default=(), alias="where")
    having_conditions: Tuple[AnyCondition, ...] = Field(default=(), alias="having")
    limit_value: Optional[NonNegativeInt] = Field(default=None, alias="limit")
    offset_value: Optional[NonNegativeInt] = Field(default=None, alias="offset")
    order_by_specs: Tuple[OrderSpec, ...] = Field(default=(), alias="orderBy")
    group_by_columns: Tuple[str, ...] = Field(default=(), alias="groupBy")
    union_queries: Tuple[UnionPart, ...] = Field(default=(), alias="unionQueries")

    def where(self, condition: Condition) -> Self:
        """Append a WHERE condition; multiple conditions are AND-ed."""
        return self._replace(where_conditions=self.where_conditions + (condition,))

    def having(self, condition: Condition) -> Self:
        """Append a HAVING condition; multiple conditions are AND-ed."""
        return self._replace(having_conditions=self.having_conditions + (condition,))

    def get_limit(self) -> Optional[int]:
        return self.limit_value

    def limit(self, limit: int) -> Self:
        return self._replace(limit_value=limit)

    def clear_limit(self) -> Self:
        return self._replace(limit_value=None)

    def get_offset(self) -> Optional[int]:
        return self.offset_value

    def offset(self, offset: int) -> Self:
        return self._replace(offset_value=offset)

    def clear_offset(self) -> Self:
        return self._replace(offset_value=None)

    def get_order_by(self) -> Tuple[OrderSpec, ...]:
        return self.order_by_specs

    def order_by(self, field: str, direction: Union[OrderDirection, str] = OrderDirection.ASC) -> Self:
        spec = build_model(OrderSpec, field=field, direction=direction)
        return self._replace(order_by_specs=self.order_by_specs + (spec,))

    def remove_order_by(self) -> Self:
        return self._replace(order_by_specs=())

    def get_group_by(self) -> Tuple[str, ...]:
        return self.group_by_columns

    def group_by(self, *fields: str) -> Self:
        return self._replace(group_by_columns=self.group_by_columns + fields)

    def remove_group_by(self) -> Self:
        return self._replace(group_by_columns=())

    def union(self, query: "SelectQuery", union_type: Union[UnionType, str] = UnionType.UNION) -> Self:
        """Compose with another query.

        Queries are immutable, so later builder calls on ``query`` return
        new objects and never affect this union.
        """
        part = build_model(UnionPart, union_type=union_type, query=query)
        return self._replace(union_queries=self.union_queries + (part,))

    def get_table_names(self) -> List[str]:
        """Table names of this query and all unioned queries, de-duplicated."""
        names = super().get_table_names()
        for part in self.union_queries:
            names.extend(part.query.get_table_names())
        return list(dict.fromkeys(names))

    def _render(self, flavor: Flavor) -> str:
        sql = super()._render(flavor)

        if self.joins:
            sql += f" {self._render_joins(flavor)}"
        if self.where_conditions:
            sql += " WHERE " + " AND ".join(c._render(flavor) for c in self.where_conditions)
        if self.group_by_columns:
            sql += " GROUP BY " + ", ".join(flavor.escape_column(c) for c in self.group_by_columns)
        if self.having_conditions:
            sql += " HAVING " + " AND ".join(c._render(flavor) for c in self.having_conditions)
        if self.order_by_specs:
            sql += " ORDER BY " + ", ".join(
                f"{flavor.escape_column(o.field)} {OrderDirection(o.direction).value}"
                for o in self.order_by_specs
            )
        if self.limit_value is not None:
            sql += f" LIMIT {self.limit_value}"
        if self.offset_value is not None:
            sql += f" OFFSET {self.offset_value}"

        for part in self.union_queries:
            sql = f"({sql}) {UnionType(part.union_type).value} ({part.query._render(flavor)})"
        return sql


Table.model_rebuild()
Join.model_rebuild()
UnionPart.model_rebuild()
SelectQuery.model_rebuild()
