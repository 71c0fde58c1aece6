"""JSON Schema to F# Generator

Generates F# record and discriminated union declarations from JSON Schema
documents, so that values can round-trip through JSON between the
schema's source runtime and F#.
"""

__version__ = "0.3.0"

from .analyzer import TypeRegistry
from .config import GeneratorConfig, RecordLayout
from .errors import (
    EnumHasNoTypes,
    ErrorKind,
    ExternalTypeNotAvailable,
    InvalidSchema,
    NoNameForType,
    NoObjectPartFound,
    NoTypeSet,
    SimpleEnumNotSimple,
    TypeGenError,
    TypeIsNoRealType,
)
from .generator import TypeGenerator, generate
from .schema_ast import RootSchema, SchemaParser

__all__ = [
    "generate",
    "TypeGenerator",
    "TypeRegistry",
    "GeneratorConfig",
    "RecordLayout",
    "RootSchema",
    "SchemaParser",
    "ErrorKind",
    "TypeGenError",
    "NoNameForType",
    "NoObjectPartFound",
    "TypeIsNoRealType",
    "NoTypeSet",
    "EnumHasNoTypes",
    "ExternalTypeNotAvailable",
    "SimpleEnumNotSimple",
    "InvalidSchema",
]
