"""
Node definitions for the schema graph.

These nodes are the only input the translator consumes. They are built
once (by the parser or by an external reflection step) and never mutated
during translation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class InstanceKind(str, Enum):
    """JSON Schema instance type."""

    NULL = "null"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NUMBER = "number"
    STRING = "string"
    INTEGER = "integer"


@dataclass
class SchemaNode:
    """Base class for all schema nodes."""

    # Original location in schema (for error messages)
    source_path: str = ""


@dataclass
class AcceptAllNode(SchemaNode):
    """A boolean schema: the permissive placeholder that accepts any value."""

    accepts: bool = True


@dataclass
class TypedNode(SchemaNode):
    """A schema object describing one or more instance kinds."""

    instance_kinds: list[InstanceKind] = field(default_factory=list)

    # Object kind: property name -> schema, in declaration order
    properties: dict[str, SchemaNode] | None = None

    # Array kind: single element schema or fixed-arity tuple
    items: SchemaNode | list[SchemaNode] | None = None

    literal_values: list[Any] | None = None
    alternatives: list[SchemaNode] | None = None

    reference: str | None = None  # e.g. "#/definitions/MyType"
    title: str | None = None

    @property
    def is_object_shaped(self) -> bool:
        """Whether the node declares an object kind with a properties map."""
        return InstanceKind.OBJECT in self.instance_kinds and self.properties is not None

    @property
    def is_null_only(self) -> bool:
        return self.instance_kinds == [InstanceKind.NULL] and self.reference is None


@dataclass
class RootSchema:
    """Root of the schema graph: the root node plus its referenceable definitions."""

    schema: SchemaNode = field(default_factory=TypedNode)
    definitions: dict[str, SchemaNode] = field(default_factory=dict)
