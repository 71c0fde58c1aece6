"""
F# emitter.

Renders records as ``type X = { a: string, b: option<float> }`` and sum
types as one ``| Case of Payload`` line per variant.
"""

from __future__ import annotations

import re

from ..analyzer.ir_nodes import Declaration, RecordDef, TypeKind, TypeRef, UnionDef, VariantDef
from ..config import RecordLayout
from .base import Emitter

_IDENTIFIER_PATTERN = re.compile(r"^[^\W\d][\w']*$")


class FSharpBackend(Emitter):
    """F# declaration emitter."""

    TEMPLATE_LANG = "fsharp"
    FILE_EXTENSION = "fs"

    # Canonical primitive name -> F# type name
    TYPE_MAP = {
        "unit": "unit",
        "bool": "bool",
        "float": "float",
        "string": "string",
        "int": "int",
        "object": "object",
    }

    # Keywords and reserved identifiers, used as names only inside ``double backticks``
    KEYWORDS = frozenset(
        """
        abstract and as assert base begin class default delegate do done downcast
        downto elif else end exception extern false finally fixed for fun function
        global if in inherit inline interface internal lazy let match member module
        mutable namespace new not null of open or override private public rec
        return select sig static struct then to true try type upcast use val void
        when while with yield const asr land lor lsl lsr lxor mod break checked
        component constraint continue event external include mixin parallel
        process protected pure sealed tailcall trait virtual
        """.split()
    )

    def quote_identifier(self, name: str) -> str:
        """Wrap names that are not plain F# identifiers in double backticks."""
        if _IDENTIFIER_PATTERN.match(name) and name not in self.KEYWORDS:
            return name
        return f"``{name}``"

    def translate_type(self, type_ref: TypeRef) -> str:
        """Translate an IR type to F# type syntax."""
        kind = type_ref.kind
        if kind == TypeKind.PRIMITIVE:
            name = self.TYPE_MAP.get(type_ref.name, type_ref.name)
            return self.config.type_overrides.get(type_ref.name, name)
        if kind == TypeKind.NAMED:
            return self.quote_identifier(type_ref.name)
        if kind == TypeKind.ARRAY:
            return f"{self._translate_operand(type_ref.type_args[0])}[]"
        if kind == TypeKind.TUPLE:
            if not type_ref.type_args:
                return "unit"
            return " * ".join(self._translate_operand(arg) for arg in type_ref.type_args)
        if kind == TypeKind.OPTION:
            return f"option<{self.translate_type(type_ref.type_args[0])}>"
        if kind == TypeKind.RESULT:
            return f"result<{','.join(self.translate_type(arg) for arg in type_ref.type_args)}>"
        raise ValueError(f"Unsupported type kind: {kind}")

    def _translate_operand(self, type_ref: TypeRef) -> str:
        # Tuples nested in arrays or tuples need parentheses
        text = self.translate_type(type_ref)
        if type_ref.kind == TypeKind.TUPLE and type_ref.type_args:
            return f"({text})"
        return text

    def render_declaration(self, declaration: Declaration, keyword: str | None = None) -> str:
        keyword = keyword or self.DECLARE_KEYWORD
        if isinstance(declaration, RecordDef):
            return self._render_record(declaration, keyword)
        if isinstance(declaration, UnionDef):
            return self._render_union(declaration, keyword)
        raise TypeError(f"Unknown declaration {type(declaration).__name__}")

    def _render_record(self, record: RecordDef, keyword: str) -> str:
        # F# records need at least one field, a fieldless record becomes a single-case union
        if not record.fields:
            return self._render_union(UnionDef(name=record.name, variants=[VariantDef(name=record.name)]), keyword)

        fields = [f"{self.quote_identifier(field.name)}: {self.translate_type(field.type_ref)}" for field in record.fields]
        return self.record_template.render(
            KEYWORD=keyword,
            NAME=self.quote_identifier(record.name),
            FIELDS=fields,
            MULTILINE=self.config.record_layout == RecordLayout.MULTILINE,
            INDENT=self.config.indent,
        ).rstrip("\n")

    def _render_union(self, union: UnionDef, keyword: str) -> str:
        return self.union_template.render(
            KEYWORD=keyword,
            NAME=self.quote_identifier(union.name),
            VARIANTS=[self._format_variant(variant) for variant in union.variants],
            INDENT=self.config.indent,
        ).rstrip("\n")

    def _format_variant(self, variant: VariantDef) -> str:
        name = self.quote_identifier(variant.name)
        if not variant.payload:
            return name
        payload = " * ".join(self._translate_operand(part) for part in variant.payload)
        return f"{name} of {payload}"
