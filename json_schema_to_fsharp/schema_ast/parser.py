"""
JSON Schema parser that builds the schema graph.

Parses a JSON Schema document (as emitted by reflection tools such as
schemars) into SchemaNode objects without resolving references or doing
any target-language processing.
"""

from __future__ import annotations

from typing import Any

from ..errors import InvalidSchema
from .nodes import AcceptAllNode, InstanceKind, RootSchema, SchemaNode, TypedNode


class SchemaParser:
    """Parses JSON Schema into a RootSchema."""

    def parse(self, schema: dict[str, Any]) -> RootSchema:
        """
        Parse a JSON Schema document.

        Args:
            schema: The JSON Schema dictionary

        Returns:
            RootSchema with the parsed root node and definitions
        """
        if not isinstance(schema, dict):
            raise InvalidSchema(f"expected a schema object, got {type(schema).__name__}", "#")

        definitions: dict[str, SchemaNode] = {}
        for section in ("definitions", "$defs"):
            for name, def_schema in (schema.get(section) or {}).items():
                # Skip comment entries
                if isinstance(def_schema, str) or name.startswith("_comment"):
                    continue
                definitions.setdefault(name, self.parse_node(def_schema, f"#/{section}/{name}"))

        return RootSchema(
            schema=self.parse_node(schema, "#"),
            definitions=definitions,
        )

    def parse_node(self, schema: Any, path: str) -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The schema (dict or boolean schema)
            path: Current path in schema (for error messages)

        Returns:
            AcceptAllNode or TypedNode
        """
        if isinstance(schema, bool):
            return AcceptAllNode(accepts=schema, source_path=path)
        if not isinstance(schema, dict):
            raise InvalidSchema(f"expected a schema object or boolean, got {type(schema).__name__}", path)

        # schemars wraps a described $ref in a one-element allOf
        all_of = schema.get("allOf")
        if isinstance(all_of, list) and len(all_of) == 1 and isinstance(all_of[0], dict):
            unwrapped = {k: v for k, v in schema.items() if k != "allOf"}
            unwrapped.update(all_of[0])
            return self.parse_node(unwrapped, f"{path}/allOf/0")

        node = TypedNode(
            instance_kinds=self._parse_instance_kinds(schema, path),
            reference=schema.get("$ref"),
            title=schema.get("title"),
            source_path=path,
        )

        if "properties" in schema:
            node.properties = {
                prop_name: self.parse_node(prop_schema, f"{path}/properties/{prop_name}")
                for prop_name, prop_schema in schema["properties"].items()
            }
            if not node.instance_kinds:
                node.instance_kinds = [InstanceKind.OBJECT]

        items_schema = schema.get("items")
        if isinstance(items_schema, list):
            # Tuple type
            node.items = [self.parse_node(item, f"{path}/items/{i}") for i, item in enumerate(items_schema)]
        elif items_schema is not None:
            node.items = self.parse_node(items_schema, f"{path}/items")

        if "enum" in schema:
            node.literal_values = list(schema["enum"])
        elif "const" in schema:
            node.literal_values = [schema["const"]]

        for union_key in ("anyOf", "oneOf"):
            if union_key in schema:
                node.alternatives = [self.parse_node(variant, f"{path}/{union_key}/{i}") for i, variant in enumerate(schema[union_key])]
                break

        return node

    def _parse_instance_kinds(self, schema: dict[str, Any], path: str) -> list[InstanceKind]:
        type_value = schema.get("type")
        if type_value is None:
            return []
        if isinstance(type_value, str):
            type_value = [type_value]

        kinds: list[InstanceKind] = []
        for type_name in type_value:
            try:
                kind = InstanceKind(type_name)
            except ValueError:
                raise InvalidSchema(f"unknown instance type '{type_name}'", path) from None
            if kind not in kinds:
                kinds.append(kind)
        return kinds
