"""
Normalization of two-branch unions containing a null marker into options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..schema_ast.nodes import AcceptAllNode, InstanceKind, SchemaNode, TypedNode
from .ir_nodes import TypeRef
from .registry import TypeRegistry

if TYPE_CHECKING:
    from .analyzer import SchemaAnalyzer


def is_null_marker(node: SchemaNode) -> bool:
    """Whether a union branch only stands for "no value"."""
    if isinstance(node, AcceptAllNode):
        return True
    if isinstance(node, TypedNode):
        return node.is_null_only
    raise TypeError(f"Unknown schema node {type(node).__name__}")


class OptionalNormalizer:
    """Collapses {T, null} unions into option<T>."""

    def __init__(self, analyzer: SchemaAnalyzer):
        self.analyzer = analyzer

    def applies_to(self, alternatives: list[SchemaNode]) -> bool:
        return len(alternatives) == 2

    def normalize(self, alternatives: list[SchemaNode], registry: TypeRegistry, name_hint: str) -> TypeRef:
        """
        Resolve a two-branch union.

        Exactly one null marker gives option<T> over the other branch; zero
        or two give the result<T1,T2> placeholder over both branches.
        """
        non_null = [alt for alt in alternatives if not is_null_marker(alt)]
        if len(non_null) == 1:
            return TypeRef.option_of(self.analyzer.resolve_type(non_null[0], registry, name_hint))
        return TypeRef.result_of([self.analyzer.resolve_type(alt, registry, f"{name_hint}{i + 1}") for i, alt in enumerate(alternatives)])

    def normalize_kinds(self, node: TypedNode, registry: TypeRegistry, name_hint: str) -> TypeRef:
        """Resolve a node declaring several instance kinds, e.g. ["number", "null"]."""
        kinds = node.instance_kinds
        mapper = self.analyzer.primitive_mapper
        non_null = [kind for kind in kinds if kind != InstanceKind.NULL]
        if len(kinds) == 2 and len(non_null) == 1:
            return TypeRef.option_of(mapper.map_kind(non_null[0], node, registry, name_hint))
        return TypeRef.result_of([mapper.map_kind(kind, node, registry, name_hint) for kind in kinds])
