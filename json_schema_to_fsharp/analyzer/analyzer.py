"""
Schema analyzer that turns schema nodes into declarations.

Classifies nodes as object-shaped or enum-shaped, resolves field and
variant types recursively and declares inline structure under
synthesized names.
"""

from __future__ import annotations

from ..errors import NoTypeSet, TypeIsNoRealType
from ..schema_ast.nodes import AcceptAllNode, SchemaNode, TypedNode
from .enum_translator import EnumTranslator
from .ir_nodes import Declaration, TypeRef
from .name_resolver import NameResolver
from .object_translator import ObjectTranslator
from .optional_normalizer import OptionalNormalizer
from .primitive_mapper import PrimitiveMapper
from .registry import TypeRegistry


class SchemaAnalyzer:
    """Analyzes schema nodes and builds declarations into a registry."""

    def __init__(self):
        self.name_resolver = NameResolver()
        self.primitive_mapper = PrimitiveMapper(self)
        self.optional_normalizer = OptionalNormalizer(self)
        self.enum_translator = EnumTranslator(self)
        self.object_translator = ObjectTranslator(self)

    def translate_definition(self, node: SchemaNode, name: str, registry: TypeRegistry) -> Declaration:
        """
        Build the declaration of a named node.

        Args:
            node: The node to declare
            name: Declaration name
            registry: Registry of the current generation run

        Returns:
            A record for object-shaped nodes, a sum type otherwise
        """
        if isinstance(node, AcceptAllNode):
            raise TypeIsNoRealType(f"'{name}' is a boolean schema", node.source_path)
        if not isinstance(node, TypedNode):
            raise TypeError(f"Unknown schema node {type(node).__name__}")

        if node.is_object_shaped:
            return self.object_translator.translate(node, name, registry)
        return self.enum_translator.translate(node, name, registry)

    def resolve_reference(self, reference: str, registry: TypeRegistry, source_path: str = "") -> TypeRef:
        """Resolve a $ref, declaring its target on first use."""
        name = registry.resolve(
            reference,
            lambda def_name, def_node: self.translate_definition(def_node, def_name, registry),
            source_path,
        )
        return TypeRef.named(name)

    def resolve_type(self, node: SchemaNode, registry: TypeRegistry, name_hint: str) -> TypeRef:
        """
        Resolve the type of a field, variant payload or array item.

        Args:
            node: The node to resolve
            registry: Registry of the current generation run
            name_hint: Name to give inline structure that needs its own declaration

        Returns:
            The resolved type
        """
        if isinstance(node, AcceptAllNode):
            raise TypeIsNoRealType("a boolean schema has no concrete type", node.source_path)
        if not isinstance(node, TypedNode):
            raise TypeError(f"Unknown schema node {type(node).__name__}")

        if node.reference is not None:
            return self.resolve_reference(node.reference, registry, node.source_path)

        if node.instance_kinds:
            return self.primitive_mapper.map_kinds(node, registry, name_hint)

        if node.alternatives:
            if self.optional_normalizer.applies_to(node.alternatives):
                return self.optional_normalizer.normalize(node.alternatives, registry, name_hint)
            return self.declare_inline(node, registry, name_hint)

        if node.literal_values:
            return self.declare_inline(node, registry, name_hint)

        raise NoTypeSet("node has no instance type, reference or alternatives", node.source_path)

    def declare_inline(self, node: TypedNode, registry: TypeRegistry, name_hint: str) -> TypeRef:
        """Declare inline structure under its title or synthesized name and reference it."""
        name = registry.reserve_name(self.name_resolver.resolve(node, name_hint))
        with registry.building(name):
            declaration = self.translate_definition(node, name, registry)
        return TypeRef.named(registry.register_anonymous(name, declaration))
