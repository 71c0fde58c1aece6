"""
Translation of object-shaped nodes into record declarations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import NoObjectPartFound
from ..schema_ast.nodes import TypedNode
from .ir_nodes import FieldDef, RecordDef
from .registry import TypeRegistry

if TYPE_CHECKING:
    from .analyzer import SchemaAnalyzer


class ObjectTranslator:
    """Builds product type declarations."""

    def __init__(self, analyzer: SchemaAnalyzer):
        self.analyzer = analyzer

    def translate(self, node: TypedNode, name: str, registry: TypeRegistry) -> RecordDef:
        """
        Translate an object-shaped node.

        Inline objects found in fields are declared separately under
        ``<name><FieldName>`` and referenced by that name.

        Args:
            node: The node carrying a properties map
            name: Name of the record, also the prefix for inline field types
            registry: Registry of the current generation run

        Returns:
            The record declaration, fields in property order
        """
        if node.properties is None:
            raise NoObjectPartFound(f"'{name}' has no properties", node.source_path)

        fields = []
        for prop_name, prop_node in node.properties.items():
            field_hint = self.analyzer.name_resolver.synthesize(name, prop_name)
            fields.append(FieldDef(name=prop_name, type_ref=self.analyzer.resolve_type(prop_node, registry, field_hint)))
        return RecordDef(name=name, fields=fields)
