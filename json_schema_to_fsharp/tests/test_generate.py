import pytest

from json_schema_to_fsharp import (
    ExternalTypeNotAvailable,
    GeneratorConfig,
    NoNameForType,
    RecordLayout,
    SchemaParser,
    TypeRegistry,
    generate,
)

TEST_TYPE = {
    "title": "TestType",
    "type": "object",
    "required": ["a_string"],
    "properties": {
        "a_string": {"type": "string"},
        "optional_float": {"type": ["number", "null"], "format": "float"},
        "test_enum": {"$ref": "#/definitions/TestEnum"},
    },
    "definitions": {
        "TestEnum": {
            "oneOf": [
                {"type": "string", "enum": ["A", "D"]},
                {
                    "type": "object",
                    "properties": {"C": {"type": "object", "properties": {"test": {"type": "number"}}}},
                },
            ]
        }
    },
}


class TestGenerate:
    """Test the single-root entry point sharing a registry"""

    def test_root_text_and_registry(self):
        registry = TypeRegistry()
        text = generate(TEST_TYPE, registry)
        assert text == "type TestType = { a_string: string, optional_float: option<float>, test_enum: TestEnum }"
        assert registry.resolved_definitions() == [
            ("TestEnumC", "type TestEnumC = { test: float }"),
            ("TestEnum", "type TestEnum =\n    | A\n    | D\n    | C of TestEnumC"),
            ("TestType", text),
        ]
        assert registry.in_progress == set()

    def test_recursive_root_registered_once(self):
        schema = {
            "title": "SimpleRecursiveEnum",
            "oneOf": [
                {"type": "object", "properties": {"Rec": {"$ref": "#/definitions/SimpleRecursiveEnum"}}},
                {"type": "object", "properties": {"Nope": {"type": "number", "format": "float"}}},
            ],
            "definitions": {
                "SimpleRecursiveEnum": {
                    "oneOf": [
                        {"type": "object", "properties": {"Rec": {"$ref": "#/definitions/SimpleRecursiveEnum"}}},
                        {"type": "object", "properties": {"Nope": {"type": "number", "format": "float"}}},
                    ]
                }
            },
        }
        registry = TypeRegistry()
        text = generate(schema, registry)
        assert text == "type SimpleRecursiveEnum =\n    | Rec of SimpleRecursiveEnum\n    | Nope of float"
        assert registry.resolved_definitions() == [("SimpleRecursiveEnum", text)]

        assert generate(schema, registry) == text
        assert [name for name, _ in registry.resolved_definitions()] == ["SimpleRecursiveEnum"]

    def test_parsed_root(self):
        root = SchemaParser().parse(TEST_TYPE)
        assert generate(root, TypeRegistry()).startswith("type TestType = {")

    def test_shared_registry_across_roots(self):
        registry = TypeRegistry()
        generate(TEST_TYPE, registry)
        other = {
            "title": "Other",
            "type": "object",
            "properties": {"e": {"$ref": "#/definitions/TestEnum"}},
            "definitions": TEST_TYPE["definitions"],
        }
        assert generate(other, registry) == "type Other = { e: TestEnum }"
        assert [name for name, _ in registry.resolved_definitions()] == ["TestEnumC", "TestEnum", "TestType", "Other"]

    def test_root_already_resolved(self):
        registry = TypeRegistry()
        generate(TEST_TYPE, registry)
        assert generate({"title": "TestEnum"}, registry) == "type TestEnum =\n    | A\n    | D\n    | C of TestEnumC"

    def test_fallback_name_for_fieldless_object(self):
        assert generate({"type": "object", "properties": {}}, TypeRegistry(), "Unnamed") == "type Unnamed =\n    | Unnamed"

    def test_no_name(self):
        with pytest.raises(NoNameForType):
            generate({"type": "object", "properties": {}}, TypeRegistry())

    def test_config_applies_to_root(self):
        config = GeneratorConfig(record_layout=RecordLayout.MULTILINE)
        text = generate(TEST_TYPE, TypeRegistry(), config=config)
        assert text.startswith("type TestType =\n    { a_string: string\n")

    def test_unknown_reference(self):
        schema = {"title": "T", "type": "object", "properties": {"x": {"$ref": "#/definitions/Nope"}}}
        with pytest.raises(ExternalTypeNotAvailable):
            generate(schema, TypeRegistry())


if __name__ == "__main__":
    pytest.main([__file__])
