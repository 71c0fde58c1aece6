"""
Errors raised while translating a schema into declarations.

Every error is terminal for the current generation call: nothing is
recovered locally and no partial output is returned.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Kind of translation failure."""

    NO_NAME_FOR_TYPE = "NoNameForType"
    NO_OBJECT_PART_FOUND = "NoObjectPartFound"
    TYPE_IS_NO_REAL_TYPE = "TypeIsNoRealType"
    NO_TYPE_SET = "NoTypeSet"
    ENUM_HAS_NO_TYPES = "EnumHasNoTypes"
    EXTERNAL_TYPE_NOT_AVAILABLE = "ExternalTypeNotAvailable"
    SIMPLE_ENUM_NOT_SIMPLE = "SimpleEnumNotSimple"
    INVALID_SCHEMA = "InvalidSchema"


class TypeGenError(Exception):
    """Base class for all translation errors."""

    kind: ErrorKind

    def __init__(self, message: str, source_path: str = ""):
        self.message = message
        self.source_path = source_path
        location = f" at {source_path}" if source_path else ""
        super().__init__(f"{self.kind.value}{location}: {message}")


class NoNameForType(TypeGenError):
    kind = ErrorKind.NO_NAME_FOR_TYPE


class NoObjectPartFound(TypeGenError):
    kind = ErrorKind.NO_OBJECT_PART_FOUND


class TypeIsNoRealType(TypeGenError):
    kind = ErrorKind.TYPE_IS_NO_REAL_TYPE


class NoTypeSet(TypeGenError):
    kind = ErrorKind.NO_TYPE_SET


class EnumHasNoTypes(TypeGenError):
    kind = ErrorKind.ENUM_HAS_NO_TYPES


class ExternalTypeNotAvailable(TypeGenError):
    kind = ErrorKind.EXTERNAL_TYPE_NOT_AVAILABLE


class SimpleEnumNotSimple(TypeGenError):
    kind = ErrorKind.SIMPLE_ENUM_NOT_SIMPLE


class InvalidSchema(TypeGenError):
    kind = ErrorKind.INVALID_SCHEMA
