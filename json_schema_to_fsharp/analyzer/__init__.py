"""
Analyzer module.

Contains name resolution, type mapping, declaration building and the
type registry.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer
from .enum_translator import EnumTranslator
from .ir_nodes import (
    Declaration,
    FieldDef,
    RecordDef,
    TypeKind,
    TypeRef,
    UnionDef,
    VariantDef,
)
from .name_resolver import NameResolver
from .object_translator import ObjectTranslator
from .optional_normalizer import OptionalNormalizer
from .primitive_mapper import PrimitiveMapper
from .registry import TypeRegistry

__all__ = [
    "Declaration",
    "FieldDef",
    "RecordDef",
    "TypeKind",
    "TypeRef",
    "UnionDef",
    "VariantDef",
    "SchemaAnalyzer",
    "NameResolver",
    "PrimitiveMapper",
    "OptionalNormalizer",
    "EnumTranslator",
    "ObjectTranslator",
    "TypeRegistry",
]
