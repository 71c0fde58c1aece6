import pytest

from json_schema_to_fsharp import InvalidSchema
from json_schema_to_fsharp.schema_ast import AcceptAllNode, InstanceKind, SchemaParser, TypedNode


class TestSchemaParser:
    """Test building the schema graph from JSON Schema dictionaries"""

    def setup_method(self):
        self.parser = SchemaParser()

    def test_boolean_schemas(self):
        assert self.parser.parse_node(True, "#/a") == AcceptAllNode(accepts=True, source_path="#/a")
        assert self.parser.parse_node(False, "#/b") == AcceptAllNode(accepts=False, source_path="#/b")

    def test_type_string_and_list(self):
        assert self.parser.parse_node({"type": "integer"}, "#").instance_kinds == [InstanceKind.INTEGER]
        node = self.parser.parse_node({"type": ["number", "null", "number"]}, "#")
        assert node.instance_kinds == [InstanceKind.NUMBER, InstanceKind.NULL]

    def test_unknown_type(self):
        with pytest.raises(InvalidSchema) as exc_info:
            self.parser.parse_node({"type": "decimal"}, "#/properties/price")
        assert exc_info.value.source_path == "#/properties/price"

    def test_non_schema_value(self):
        with pytest.raises(InvalidSchema):
            self.parser.parse_node(["not", "a", "schema"], "#")
        with pytest.raises(InvalidSchema):
            self.parser.parse("not a schema")

    def test_properties_keep_order_and_imply_object(self):
        node = self.parser.parse_node({"properties": {"b": {"type": "string"}, "a": {"type": "integer"}}}, "#")
        assert node.instance_kinds == [InstanceKind.OBJECT]
        assert list(node.properties) == ["b", "a"]
        assert node.properties["b"].source_path == "#/properties/b"
        assert node.is_object_shaped

    def test_object_without_properties_is_not_object_shaped(self):
        node = self.parser.parse_node({"type": "object"}, "#")
        assert node.properties is None
        assert not node.is_object_shaped

    def test_items(self):
        single = self.parser.parse_node({"type": "array", "items": {"type": "string"}}, "#")
        assert isinstance(single.items, TypedNode)
        assert single.items.source_path == "#/items"

        pair = self.parser.parse_node({"type": "array", "items": [{"type": "number"}, True]}, "#")
        assert isinstance(pair.items, list)
        assert [item.source_path for item in pair.items] == ["#/items/0", "#/items/1"]
        assert isinstance(pair.items[1], AcceptAllNode)

    def test_enum_and_const(self):
        assert self.parser.parse_node({"enum": ["A", "B"]}, "#").literal_values == ["A", "B"]
        assert self.parser.parse_node({"const": "Only"}, "#").literal_values == ["Only"]

    def test_alternatives(self):
        node = self.parser.parse_node({"oneOf": [{"type": "string"}, {"type": "null"}]}, "#")
        assert len(node.alternatives) == 2
        assert node.alternatives[1].is_null_only

        node = self.parser.parse_node({"anyOf": [{"type": "integer"}], "oneOf": [{"type": "string"}]}, "#")
        assert node.alternatives[0].instance_kinds == [InstanceKind.INTEGER]

    def test_single_allof_is_unwrapped(self):
        node = self.parser.parse_node({"description": "doc", "allOf": [{"$ref": "#/definitions/Inner"}]}, "#/properties/x")
        assert node.reference == "#/definitions/Inner"
        assert node.source_path == "#/properties/x/allOf/0"

    def test_reference_and_title(self):
        node = self.parser.parse_node({"$ref": "#/definitions/Foo", "title": "Bar"}, "#")
        assert node.reference == "#/definitions/Foo"
        assert node.title == "Bar"

    def test_definitions(self):
        root = self.parser.parse(
            {
                "title": "Root",
                "type": "object",
                "properties": {},
                "definitions": {
                    "_comment": "ignored",
                    "A": {"type": "string", "enum": ["X"]},
                },
                "$defs": {"B": {"type": "integer"}, "A": {"type": "boolean"}},
            }
        )
        assert root.schema.title == "Root"
        assert list(root.definitions) == ["A", "B"]
        assert root.definitions["A"].literal_values == ["X"]
        assert root.definitions["B"].source_path == "#/$defs/B"


if __name__ == "__main__":
    pytest.main([__file__])
