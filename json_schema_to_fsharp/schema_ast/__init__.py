"""
Schema graph module.

Contains the node definitions and parser for JSON Schema.
"""

from __future__ import annotations

from .nodes import AcceptAllNode, InstanceKind, RootSchema, SchemaNode, TypedNode
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "AcceptAllNode",
    "TypedNode",
    "InstanceKind",
    "RootSchema",
    "SchemaParser",
]
