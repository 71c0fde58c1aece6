"""
Name resolver for declarations.

Picks the explicit title of a node when it has one and synthesizes a
name from the enclosing prefix otherwise.
"""

from __future__ import annotations

from ..errors import NoNameForType, TypeIsNoRealType
from ..schema_ast.nodes import AcceptAllNode, SchemaNode, TypedNode
from ..utils import snake_to_pascal_case


class NameResolver:
    """Resolves type names for schema nodes."""

    def resolve(self, node: SchemaNode, prefix: str | None = None) -> str:
        """
        Get a usable type name for a node.

        Args:
            node: The schema node to name
            prefix: Fallback prefix (enclosing type name plus field or variant name)

        Returns:
            The type name
        """
        if isinstance(node, AcceptAllNode):
            raise TypeIsNoRealType("a boolean schema cannot be named", node.source_path)
        if not isinstance(node, TypedNode):
            raise TypeError(f"Unknown schema node {type(node).__name__}")

        if node.title:
            return node.title
        if not prefix:
            raise NoNameForType("node has no title and no name prefix was given", node.source_path)
        return prefix + self._kind_suffix(node)

    def synthesize(self, prefix: str, part: str) -> str:
        """Build the name of an inline type from its enclosing name and field or variant name."""
        return f"{prefix}{snake_to_pascal_case(part)}"

    def _kind_suffix(self, node: TypedNode) -> str:
        # Structural nodes are named by their prefix alone
        if node.is_object_shaped or node.literal_values or node.alternatives or not node.instance_kinds:
            return ""
        return snake_to_pascal_case(node.instance_kinds[0].value)
