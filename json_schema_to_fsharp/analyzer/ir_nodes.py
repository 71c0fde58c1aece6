"""
IR (Intermediate Representation) node definitions.

These nodes represent resolved declarations, ready for emission. All
references are resolved to names and no target syntax is baked in.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TypeKind(Enum):
    """Kind of type in the IR."""

    PRIMITIVE = "primitive"  # unit, bool, float, string, int, object
    NAMED = "named"  # A generated declaration
    ARRAY = "array"  # T[]
    TUPLE = "tuple"  # T1 * T2 * ...
    OPTION = "option"  # option<T>
    RESULT = "result"  # result<T1,T2>, the non-optional two-branch fallback


@dataclass(frozen=True)
class TypeRef:
    """A resolved type reference."""

    kind: TypeKind = TypeKind.PRIMITIVE
    name: str = ""  # Primitive or declaration name

    # For container types
    type_args: tuple[TypeRef, ...] = ()

    @staticmethod
    def primitive(name: str) -> TypeRef:
        return TypeRef(TypeKind.PRIMITIVE, name)

    @staticmethod
    def named(name: str) -> TypeRef:
        return TypeRef(TypeKind.NAMED, name)

    @staticmethod
    def array_of(item: TypeRef) -> TypeRef:
        return TypeRef(TypeKind.ARRAY, type_args=(item,))

    @staticmethod
    def tuple_of(items: list[TypeRef]) -> TypeRef:
        return TypeRef(TypeKind.TUPLE, type_args=tuple(items))

    @staticmethod
    def option_of(inner: TypeRef) -> TypeRef:
        return TypeRef(TypeKind.OPTION, type_args=(inner,))

    @staticmethod
    def result_of(branches: list[TypeRef]) -> TypeRef:
        return TypeRef(TypeKind.RESULT, type_args=tuple(branches))


@dataclass
class FieldDef:
    """A field of a record."""

    name: str = ""
    type_ref: TypeRef = field(default_factory=TypeRef)


@dataclass
class RecordDef:
    """A product type declaration."""

    name: str = ""
    fields: list[FieldDef] = field(default_factory=list)


@dataclass
class VariantDef:
    """A case of a sum type. An empty payload makes a nullary case."""

    name: str = ""
    payload: list[TypeRef] = field(default_factory=list)


@dataclass
class UnionDef:
    """A sum type declaration."""

    name: str = ""
    variants: list[VariantDef] = field(default_factory=list)


Declaration = RecordDef | UnionDef
