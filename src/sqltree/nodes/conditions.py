"""Condition (predicate) nodes.

A closed set of variants, each tagged with its own ``type`` value:

- comparisons: EqualCondition, NotEqualCondition, GreaterThanCondition,
  LessThanCondition
- ranges and sets: BetweenCondition, InCondition
- patterns: LikeCondition, NotLikeCondition
- null tests: NullCondition, NotNullCondition
- ColumnEqualCondition for column-to-column equality
- logical combinators: AndCondition, OrCondition

``AnyCondition`` is the discriminated union over all of them and is what
other nodes store. ``Conditions`` exposes one constructor per variant.
"""

from typing import Annotated, Any, ClassVar, Literal, Sequence, Tuple, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr, TypeAdapter, ValidationError

from sqltree.flavors import Flavor
from sqltree.nodes.base import SQLNode, build_model, decoding_error

#: Literal values a condition can compare against. Floats must be finite
#: since JSON has no spelling for inf or nan.
Scalar = Union[StrictBool, StrictInt, Annotated[StrictFloat, Field(allow_inf_nan=False)], StrictStr, None]


class Condition(SQLNode):
    """Base class for all predicates.

    ``Condition.from_json`` accepts any condition variant and dispatches on
    the ``type`` tag; calling ``from_json`` on a concrete variant only
    accepts that variant.
    """

    @classmethod
    def from_json(cls, data: Any) -> "AnyCondition":
        if cls is not Condition:
            return super().from_json(data)
        try:
            return _condition_adapter.validate_python(data)
        except ValidationError as e:
            raise decoding_error(e) from e

    @classmethod
    def deserialize(cls, text: str) -> "AnyCondition":
        if cls is not Condition:
            return super().deserialize(text)
        try:
            return _condition_adapter.validate_json(text)
        except ValidationError as e:
            raise decoding_error(e, text) from e


class _ComparisonCondition(Condition):
    column: str
    value: Scalar = None

    operator: ClassVar[str] = "="

    def _render(self, flavor: Flavor) -> str:
        return f"{flavor.escape_column(self.column)} {self.operator} {flavor.escape_value(self.value)}"


class EqualCondition(_ComparisonCondition):
    type: Literal["EqualCondition"] = "EqualCondition"
    operator: ClassVar[str] = "="


class NotEqualCondition(_ComparisonCondition):
    type: Literal["NotEqualCondition"] = "NotEqualCondition"
    operator: ClassVar[str] = "!="


class GreaterThanCondition(_ComparisonCondition):
    type: Literal["GreaterThanCondition"] = "GreaterThanCondition"
    operator: ClassVar[str] = ">"


class LessThanCondition(_ComparisonCondition):
    type: Literal["LessThanCondition"] = "LessThanCondition"
    operator: ClassVar[str] = "<"


class BetweenCondition(Condition):
    """Inclusive range test: ``col BETWEEN low AND high``."""

    type: Literal["BetweenCondition"] = "BetweenCondition"
    column: str
    values: Tuple[Scalar, Scalar]

    def _render(self, flavor: Flavor) -> str:
        low, high = self.values
        return (
            f"{flavor.escape_column(self.column)} BETWEEN "
            f"{flavor.escape_value(low)} AND {flavor.escape_value(high)}"
        )


class InCondition(Condition):
    """Set membership.

    An empty value list renders ``col IN (NULL)``, which is valid SQL and
    never evaluates to true.
    """

    type: Literal["InCondition"] = "InCondition"
    column: str
    values: Tuple[Scalar, ...] = ()

    def _render(self, flavor: Flavor) -> str:
        values = flavor.format_value_list(list(self.values)) if self.values else "NULL"
        return f"{flavor.escape_column(self.column)} IN ({values})"


class _PatternCondition(Condition):
    column: str
    pattern: str

    operator: ClassVar[str] = "LIKE"

    def _render(self, flavor: Flavor) -> str:
        return f"{flavor.escape_column(self.column)} {self.operator} {flavor.quote_string(self.pattern)}"


class LikeCondition(_PatternCondition):
    type: Literal["LikeCondition"] = "LikeCondition"
    operator: ClassVar[str] = "LIKE"


class NotLikeCondition(_PatternCondition):
    type: Literal["NotLikeCondition"] = "NotLikeCondition"
    operator: ClassVar[str] = "NOT LIKE"


class NullCondition(Condition):
    type: Literal["NullCondition"] = "NullCondition"
    column: str

    def _render(self, flavor: Flavor) -> str:
        return f"{flavor.escape_column(self.column)} IS NULL"


class NotNullCondition(Condition):
    type: Literal["NotNullCondition"] = "NotNullCondition"
    column: str

    def _render(self, flavor: Flavor) -> str:
        return f"{flavor.escape_column(self.column)} IS NOT NULL"


class ColumnEqualCondition(Condition):
    """Equality between two columns, typically a join predicate."""

    type: Literal["ColumnEqualCondition"] = "ColumnEqualCondition"
    left: str
    right: str

    def _render(self, flavor: Flavor) -> str:
        return f"{flavor.escape_column(self.left)} = {flavor.escape_column(self.right)}"


class _LogicalCondition(Condition):
    conditions: Tuple["AnyCondition", ...] = ()

    operator: ClassVar[str] = "AND"
    empty: ClassVar[str] = "1 = 1"

    def _render(self, flavor: Flavor) -> str:
        if not self.conditions:
            return f"({self.empty})"
        return f" {self.operator} ".join(f"({c._render(flavor)})" for c in self.conditions)


class AndCondition(_LogicalCondition):
    type: Literal["AndCondition"] = "AndCondition"
    operator: ClassVar[str] = "AND"
    empty: ClassVar[str] = "1 = 1"


class OrCondition(_LogicalCondition):
    type: Literal["OrCondition"] = "OrCondition"
    operator: ClassVar[str] = "OR"
    empty: ClassVar[str] = "1 = 0"


AnyCondition = Annotated[
    Union[
        EqualCondition,
        NotEqualCondition,
        GreaterThanCondition,
        LessThanCondition,
        BetweenCondition,
        InCondition,
        LikeCondition,
        NotLikeCondition,
        NullCondition,
        NotNullCondition,
        ColumnEqualCondition,
        AndCondition,
        OrCondition,
    ],
    Field(discriminator="type"),
]

AndCondition.model_rebuild()
OrCondition.model_rebuild()

_condition_adapter: TypeAdapter = TypeAdapter(AnyCondition)


class Conditions:
    """Constructors for every condition variant.

    Example:
        >>> C = Conditions
        >>> C.and_([C.equal("status", "active"), C.greater_than("age", 18)]).to_sql()
        "(`status` = 'active') AND (`age` > 18)"
    """

    @staticmethod
    def equal(column: str, value: Scalar) -> EqualCondition:
        return build_model(EqualCondition, column=column, value=value)

    @staticmethod
    def not_equal(column: str, value: Scalar) -> NotEqualCondition:
        return build_model(NotEqualCondition, column=column, value=value)

    @staticmethod
    def greater_than(column: str, value: Scalar) -> GreaterThanCondition:
        return build_model(GreaterThanCondition, column=column, value=value)

    @staticmethod
    def less_than(column: str, value: Scalar) -> LessThanCondition:
        return build_model(LessThanCondition, column=column, value=value)

    @staticmethod
    def between(column: str, values: Sequence[Scalar]) -> BetweenCondition:
        """Inclusive range; ``values`` is ``(low, high)``."""
        return build_model(BetweenCondition, column=column, values=tuple(values))

    @staticmethod
    def in_(column: str, values: Sequence[Scalar]) -> InCondition:
        return build_model(InCondition, column=column, values=tuple(values))

    @staticmethod
    def like(column: str, pattern: str) -> LikeCondition:
        return build_model(LikeCondition, column=column, pattern=pattern)

    @staticmethod
    def not_like(column: str, pattern: str) -> NotLikeCondition:
        return build_model(NotLikeCondition, column=column, pattern=pattern)

    @staticmethod
    def null(column: str) -> NullCondition:
        return build_model(NullCondition, column=column)

    @staticmethod
    def not_null(column: str) -> NotNullCondition:
        return build_model(NotNullCondition, column=column)

    @staticmethod
    def column_equal(left: str, right: str) -> ColumnEqualCondition:
        return build_model(ColumnEqualCondition, left=left, right=right)

    @staticmethod
    def and_(conditions: Sequence[Condition]) -> AndCondition:
        return build_model(AndCondition, conditions=tuple(conditions))

    @staticmethod
    def or_(conditions: Sequence[Condition]) -> OrCondition:
        return build_model(OrCondition, conditions=tuple(conditions))


# for shorter syntax
C = Conditions

__all__ = [
    "AnyCondition",
    "AndCondition",
    "BetweenCondition",
    "C",
    "ColumnEqualCondition",
    "Condition",
    "Conditions",
    "EqualCondition",
    "GreaterThanCondition",
    "InCondition",
    "LessThanCondition",
    "LikeCondition",
    "NotEqualCondition",
    "NotLikeCondition",
    "NotNullCondition",
    "NullCondition",
    "OrCondition",
    "Scalar",
]
