"""Tests for node serialization/deserialization."""

import json

import pytest
from pydantic import ValidationError

from sqltree import C, ErrorCode, NodeType, Q, SQLTreeError, deserialize, select, table
from sqltree.nodes import (
    DeleteMutation,
    EqualCondition,
    InsertMutation,
    Join,
    NodeBuilder,
    SelectQuery,
    Table,
    UpdateMutation,
)
from sqltree.types.base import SQLTreeBaseModel


class TestSQLTreeBaseModel:
    """Test SQLTreeBaseModel serialization functionality."""

    def test_nested_model_to_dict(self):
        """Nested models become plain dictionaries."""
        class InnerModel(SQLTreeBaseModel):
            inner_value: str

        class OuterModel(SQLTreeBaseModel):
            outer_value: int
            inner: InnerModel

        result = OuterModel(outer_value=10, inner=InnerModel(inner_value="nested")).to_dict()

        assert result["outer_value"] == 10
        assert result["inner"] == {"inner_value": "nested"}

    def test_none_values_are_omitted(self):
        class OptionalModel(SQLTreeBaseModel):
            name: str
            alias: str = None

        assert OptionalModel(name="x").to_dict() == {"name": "x"}

    def test_models_are_frozen(self):
        class FrozenModel(SQLTreeBaseModel):
            name: str

        model = FrozenModel(name="x")
        with pytest.raises(ValidationError):
            model.name = "y"


class TestWireFormat:
    """Shape of the JSON produced by to_json."""

    def test_select_query_keys(self):
        data = (
            select()
            .from_("users")
            .add_field("id", "user_id")
            .where(C.equal("id", 1))
            .order_by("id", "DESC")
            .group_by("id")
            .limit(0)
            .to_json()
        )

        assert data["type"] == "SelectQuery"
        assert data["tables"] == [{"type": "Table", "source": "users"}]
        assert data["fields"] == [{"name": "id", "alias": "user_id"}]
        assert data["where"] == [{"type": "EqualCondition", "column": "id", "value": 1}]
        assert data["orderBy"] == [{"field": "id", "direction": "DESC"}]
        assert data["groupBy"] == ["id"]
        assert data["limit"] == 0
        assert "offset" not in data

    def test_join_keys(self):
        data = select().from_("a").left_join("b", C.column_equal("a.id", "b.id")).to_json()
        assert data["joins"] == [
            {
                "type": "Join",
                "table": {"type": "Table", "source": "b"},
                "condition": {"type": "ColumnEqualCondition", "left": "a.id", "right": "b.id"},
                "joinType": "LEFT",
            }
        ]

    def test_union_keys(self):
        data = select().from_("a").union(select().from_("b"), "UNION ALL").to_json()
        assert data["unionQueries"][0]["type"] == "UNION ALL"
        assert data["unionQueries"][0]["query"]["tables"][0]["source"] == "b"

    def test_nested_table_source(self):
        data = table(select().from_("orders"), "o").to_json()
        assert data["source"]["type"] == "SelectQuery"
        assert data["alias"] == "o"

    def test_mutation_keys(self):
        assert Q.update("users").set("a", 1).to_json()["values"] == {"a": 1}
        insert = Q.insert("users").columns(["a"]).values([{"a": 1}]).to_json()
        assert insert["table"] == "users"
        assert insert["columns"] == ["a"]
        assert insert["values"] == [{"a": 1}]

    def test_serialize_is_json_text(self):
        node = select().from_("users")
        assert json.loads(node.serialize()) == node.to_json()


def _sample_nodes():
    inner = select().from_("orders").add_field("user_id").where(C.greater_than("total", 10.5))
    return [
        Table(source="users", alias="u"),
        C.equal("name", "O'Brien"),
        C.and_([C.in_("id", [1, 2]), C.or_([C.like("n", "a%"), C.not_null("m")]), C.and_([])]),
        C.between("day", ["2024-01-01", "2024-12-31"]),
        select()
        .from_("users", "u")
        .add_fields(["u.id", {"name": "COUNT(*)", "alias": "n"}])
        .left_join(table(inner, "o"), C.column_equal("u.id", "o.user_id"))
        .where(C.not_equal("u.active", False))
        .group_by("u.id")
        .having(C.greater_than("COUNT(*)", 1))
        .order_by("n", "DESC")
        .limit(0)
        .offset(10)
        .union(select().from_("archived_users"), "UNION ALL"),
        select().from_(select().from_("t")),
        Q.delete("users", "u").inner_join("bans", C.column_equal("u.id", "bans.user_id")),
        Q.update("users").set("name", "x").set("score", 1.5).where(C.equal("id", 7)),
        Q.insert("users").values([{"id": 1, "name": "a"}, {"id": 2}]),
        Q.insert("archive").columns(("id",)).select(select().from_("users").add_field("id")),
        Q.stats(),
    ]


class TestRoundTrip:
    """from_json(to_json(node)) renders identically for every flavor."""

    @pytest.mark.parametrize("flavor", ["mysql", "aws_timestream"])
    @pytest.mark.parametrize("node", _sample_nodes(), ids=lambda n: type(n).__name__)
    def test_json_round_trip(self, node, flavor):
        restored = type(node).from_json(node.to_json())
        assert restored.to_sql(flavor) == node.to_sql(flavor)
        assert restored == node

    @pytest.mark.parametrize("flavor", ["mysql", "aws_timestream"])
    @pytest.mark.parametrize("node", _sample_nodes(), ids=lambda n: type(n).__name__)
    def test_text_round_trip_through_dispatcher(self, node, flavor):
        restored = deserialize(node.serialize())
        assert type(restored) is type(node)
        assert restored.to_sql(flavor) == node.to_sql(flavor)


class TestNodeBuilder:
    """Dispatch by type tag."""

    def test_registry_covers_every_node_type(self):
        assert set(NodeBuilder.registered_types()) == set(NodeType)

    @pytest.mark.parametrize(
        "payload, expected_class",
        [
            ({"type": "Table", "source": "users"}, Table),
            ({"type": "Join", "table": {"type": "Table", "source": "b"}}, Join),
            ({"type": "SelectQuery"}, SelectQuery),
            ({"type": "EqualCondition", "column": "a", "value": 1}, EqualCondition),
            ({"type": "DeleteMutation"}, DeleteMutation),
            ({"type": "UpdateMutation", "values": {"a": 1}}, UpdateMutation),
            ({"type": "InsertMutation", "table": "t"}, InsertMutation),
        ],
    )
    def test_create_node_from_dict(self, payload, expected_class):
        assert isinstance(NodeBuilder.create_node_from_dict(payload), expected_class)

    def test_unknown_type(self):
        with pytest.raises(SQLTreeError) as exc_info:
            deserialize('{"type":"Bogus"}')
        assert exc_info.value.error_code == ErrorCode.UNKNOWN_NODE_TYPE
        assert exc_info.value.details["type"] == "Bogus"

    @pytest.mark.parametrize(
        "payload",
        [
            '{"type": "SelectQuery", "where": [{"type": "Bogus"}]}',
            '{"type": "Join", "table": {"type": "Table", "source": "b"}, "condition": {"type": "Bogus"}}',
            '{"type": "AndCondition", "conditions": [{"type": "OrCondition", "conditions": [{"type": "Bogus"}]}]}',
        ],
    )
    def test_unknown_nested_type(self, payload):
        with pytest.raises(SQLTreeError) as exc_info:
            deserialize(payload)
        assert exc_info.value.error_code == ErrorCode.UNKNOWN_NODE_TYPE
        assert exc_info.value.details["type"] == "Bogus"

    def test_missing_nested_type(self):
        with pytest.raises(SQLTreeError) as exc_info:
            SelectQuery.deserialize('{"having": [{"column": "a"}]}')
        assert exc_info.value.error_code == ErrorCode.UNKNOWN_NODE_TYPE

    def test_non_finite_float_cannot_be_serialized(self):
        with pytest.raises(SQLTreeError):
            select().from_("t").where(C.greater_than("x", float("inf")))

    def test_missing_type(self):
        with pytest.raises(SQLTreeError) as exc_info:
            deserialize('{"source": "users"}')
        assert exc_info.value.error_code == ErrorCode.UNKNOWN_NODE_TYPE

    def test_malformed_json(self):
        with pytest.raises(SQLTreeError) as exc_info:
            deserialize('{"type": "Table", ')
        error = exc_info.value
        assert error.error_code == ErrorCode.PARSE_ERROR
        assert isinstance(error.cause, json.JSONDecodeError)
        assert "Error parsing query" in error.message
        assert "Expecting" in error.message

    def test_non_object_payload(self):
        with pytest.raises(SQLTreeError) as exc_info:
            deserialize("[1, 2]")
        assert exc_info.value.error_code == ErrorCode.PARSE_ERROR

    def test_invalid_payload(self):
        with pytest.raises(SQLTreeError) as exc_info:
            deserialize('{"type": "EqualCondition"}')
        assert exc_info.value.error_code == ErrorCode.PARSE_ERROR
        assert "column" in exc_info.value.message

    def test_node_deserialize_reports_reason(self):
        with pytest.raises(SQLTreeError) as exc_info:
            SelectQuery.deserialize("not json")
        assert exc_info.value.error_code == ErrorCode.PARSE_ERROR
        assert exc_info.value.details["text"] == "not json"
