"""
Configuration for the declaration generator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RecordLayout(str, Enum):
    """How record declarations are laid out."""

    INLINE = "inline"  # type X = { a: string, b: int }
    MULTILINE = "multiline"  # one field per line, no separators


@dataclass
class GeneratorConfig:
    """Configuration options for declaration generation."""

    # Pointer prefixes stripped from $ref values to get the definition name
    ref_prefixes: list[str] = field(default_factory=lambda: ["#/definitions/", "#/$defs/"])

    # Record layout
    record_layout: RecordLayout = RecordLayout.INLINE

    # Indentation for union cases and multiline records
    indent: str = "    "

    # Replacement names for primitive types (e.g. {"int": "int64"})
    type_overrides: dict[str, str] = field(default_factory=dict)

    # Chain mutually recursive declarations with "and"
    group_recursive_types: bool = True

    # Module declaration at the top of the generated file (empty = none)
    module_name: str = ""

    # Namespaces to open after the module declaration
    opens: list[str] = field(default_factory=list)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "record_layout" and isinstance(v, str):
                config.record_layout = RecordLayout(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "ref_prefixes": self.ref_prefixes,
            "record_layout": self.record_layout.value,
            "indent": self.indent,
            "type_overrides": self.type_overrides,
            "group_recursive_types": self.group_recursive_types,
            "module_name": self.module_name,
            "opens": self.opens,
        }
