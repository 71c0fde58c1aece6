"""
Translation of literal enumerations and tagged unions into sum types.

Two input shapes produce a UnionDef:

- a simple enum: ``{"enum": ["A", "B"]}``, one nullary case per literal;
- an externally tagged union: ``{"oneOf": [...]}`` whose alternatives are
  either one-property objects (the property name is the case name and its
  schema the payload) or literal enums contributing nullary cases.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import EnumHasNoTypes, NoNameForType, SimpleEnumNotSimple
from ..schema_ast.nodes import AcceptAllNode, SchemaNode, TypedNode
from ..utils import is_identifier_like
from .ir_nodes import TypeKind, TypeRef, UnionDef, VariantDef
from .registry import TypeRegistry

if TYPE_CHECKING:
    from .analyzer import SchemaAnalyzer


class EnumTranslator:
    """Builds sum type declarations."""

    def __init__(self, analyzer: SchemaAnalyzer):
        self.analyzer = analyzer

    def translate(self, node: TypedNode, name: str, registry: TypeRegistry) -> UnionDef:
        """
        Translate an enum-shaped node.

        Args:
            node: The node carrying alternatives or literal values
            name: Name of the declaration, also the prefix for inline payloads
            registry: Registry of the current generation run

        Returns:
            The sum type declaration
        """
        if node.alternatives:
            variants = []
            for alternative in node.alternatives:
                variants.extend(self._translate_alternative(alternative, name, registry))
            return UnionDef(name=name, variants=variants)

        if node.literal_values:
            return UnionDef(name=name, variants=self._literal_variants(node.literal_values, node.source_path))

        raise EnumHasNoTypes(f"'{name}' has neither alternatives nor literal values", node.source_path)

    def _translate_alternative(self, alternative: SchemaNode, prefix: str, registry: TypeRegistry) -> list[VariantDef]:
        if isinstance(alternative, AcceptAllNode):
            raise NoNameForType("a boolean schema cannot be a union case", alternative.source_path)
        if not isinstance(alternative, TypedNode):
            raise TypeError(f"Unknown schema node {type(alternative).__name__}")

        if alternative.is_object_shaped and len(alternative.properties) == 1:
            ((case_name, payload_node),) = alternative.properties.items()
            payload_hint = self.analyzer.name_resolver.synthesize(prefix, case_name)
            payload = self.analyzer.resolve_type(payload_node, registry, payload_hint)
            return [VariantDef(name=case_name, payload=self._payload_parts(payload))]

        if alternative.literal_values:
            return self._literal_variants(alternative.literal_values, alternative.source_path)

        raise NoNameForType("union case is neither a single-property object nor a literal enum", alternative.source_path)

    def _payload_parts(self, payload: TypeRef) -> list[TypeRef]:
        # A tuple payload becomes a multi-field case
        if payload.kind == TypeKind.TUPLE and payload.type_args:
            return list(payload.type_args)
        return [payload]

    def _literal_variants(self, literal_values: list[Any], source_path: str) -> list[VariantDef]:
        variants = []
        for value in literal_values:
            if not is_identifier_like(value):
                raise SimpleEnumNotSimple(f"literal {value!r} cannot be used as a case name", source_path)
            variants.append(VariantDef(name=value))
        return variants
