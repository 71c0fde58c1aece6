"""
Utility functions for the JSON Schema to F# generator.
"""

import re

# Regex pattern to split text into words, handling camelCase boundaries.
# Letters other than A-Z count as lowercase, so non-ASCII words are kept whole.
_WORD_PATTERN = re.compile(r"[^\W\dA-Z_]+|[A-Z][^\W\dA-Z_]*|\d+")

# Identifier-like literal usable as a nullary union case
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def snake_to_pascal_case(text: str) -> str:
    """Convert snake_case, camelCase, or space-separated text to PascalCase.

    Examples:
        "first_name" -> "FirstName"
        "actionTemplate" -> "ActionTemplate"
        "first 3 rows" -> "First3Rows"
        "C" -> "C"
        "名前" -> "名前"
    """
    if not text:
        return ""
    normalized = text.replace("_", " ").replace("-", " ")
    words = _WORD_PATTERN.findall(normalized)
    return "".join(word.capitalize() for word in words if word)


def is_identifier_like(value: object) -> bool:
    """Whether a literal can be used verbatim as a union case name."""
    return isinstance(value, str) and _IDENTIFIER_PATTERN.match(value) is not None


def strip_ref_prefix(reference: str, prefixes: list[str]) -> str:
    """Strip the first matching pointer prefix from a $ref value.

    A reference without a known prefix is returned unchanged.
    """
    for prefix in prefixes:
        if reference.startswith(prefix):
            return reference[len(prefix) :]
    return reference
