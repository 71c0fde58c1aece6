"""
Mapping of JSON Schema instance kinds to target primitive and collection types.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..schema_ast.nodes import InstanceKind, SchemaNode, TypedNode
from .ir_nodes import TypeRef
from .registry import TypeRegistry

if TYPE_CHECKING:
    from .analyzer import SchemaAnalyzer


class PrimitiveMapper:
    """Maps instance kinds to primitive, array and tuple types."""

    # Canonical primitive names, the backend maps them to target syntax
    TYPE_MAP: dict[InstanceKind, str] = {
        InstanceKind.NULL: "unit",
        InstanceKind.BOOLEAN: "bool",
        InstanceKind.NUMBER: "float",
        InstanceKind.STRING: "string",
        InstanceKind.INTEGER: "int",
        InstanceKind.OBJECT: "object",
    }

    def __init__(self, analyzer: SchemaAnalyzer):
        self.analyzer = analyzer

    def map_kinds(self, node: TypedNode, registry: TypeRegistry, name_hint: str) -> TypeRef:
        """
        Map every instance kind a node declares.

        A single kind maps directly; several kinds are normalized like a
        union of single-kind branches.
        """
        if len(node.instance_kinds) == 1:
            return self.map_kind(node.instance_kinds[0], node, registry, name_hint)
        return self.analyzer.optional_normalizer.normalize_kinds(node, registry, name_hint)

    def map_kind(self, kind: InstanceKind, node: TypedNode, registry: TypeRegistry, name_hint: str) -> TypeRef:
        """
        Map a single instance kind of a node.

        Args:
            kind: The instance kind to map
            node: The node declaring it (for properties and items)
            registry: Registry of the current generation run
            name_hint: Name to use if inline structure must be declared

        Returns:
            The resolved type
        """
        if kind == InstanceKind.OBJECT and node.properties is not None:
            return self.analyzer.declare_inline(node, registry, name_hint)
        if kind == InstanceKind.ARRAY:
            return self._map_array(node.items, registry, name_hint)
        return TypeRef.primitive(self.TYPE_MAP[kind])

    def _map_array(self, items: SchemaNode | list[SchemaNode] | None, registry: TypeRegistry, name_hint: str) -> TypeRef:
        if items is None:
            return TypeRef.array_of(TypeRef.primitive(self.TYPE_MAP[InstanceKind.OBJECT]))
        if isinstance(items, list):
            return TypeRef.tuple_of([self.analyzer.resolve_type(item, registry, f"{name_hint}{i + 1}") for i, item in enumerate(items)])
        # Inline objects in arrays share the name of the field
        return TypeRef.array_of(self.analyzer.resolve_type(items, registry, name_hint))
