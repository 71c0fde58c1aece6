"""
Base class for declaration emitters.

Emitters are a pure formatting layer over the IR: they never walk the
schema and never touch the registry beyond the records handed to them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

import jinja2

from ..analyzer.ir_nodes import Declaration, TypeRef
from ..config import GeneratorConfig


class Emitter(ABC):
    """Abstract base class for target language emitters."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Keyword opening a declaration, and the one continuing a recursive group
    DECLARE_KEYWORD: str = "type"
    CONTINUE_KEYWORD: str = "and"

    def __init__(self, config: GeneratorConfig | None = None):
        """
        Initialize the emitter.

        Args:
            config: Generator configuration
        """
        self.config = config or GeneratorConfig()
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.record_template = self.jinja_env.get_template(f"record.{self.FILE_EXTENSION}.jinja2")
        self.union_template = self.jinja_env.get_template(f"union.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def translate_type(self, type_ref: TypeRef) -> str:
        """
        Translate an IR type to a language-specific type string.

        Args:
            type_ref: The type reference

        Returns:
            Language-specific type string
        """

    @abstractmethod
    def render_declaration(self, declaration: Declaration, keyword: str | None = None) -> str:
        """
        Render one declaration.

        Args:
            declaration: Record or sum type declaration
            keyword: Keyword opening the declaration (default: DECLARE_KEYWORD)

        Returns:
            Declaration text without trailing newline
        """

    def render_prefix(self) -> str:
        """Render the text preceding all declarations (may be empty)."""
        return self.prefix_template.render(
            MODULE_NAME=self.config.module_name,
            OPENS=self.config.opens,
        ).strip("\n")

    def render_module(
        self,
        entries: list[tuple[str, Declaration]],
        recursive_links: Iterable[tuple[str, str]] = (),
    ) -> str:
        """
        Render a whole source file.

        Declarations keep their order. When grouping is enabled, each span
        of mutually recursive declarations is chained with CONTINUE_KEYWORD
        so that forward references are legal.

        Args:
            entries: (name, declaration) pairs in emission order
            recursive_links: (referencing name, referenced name) pairs

        Returns:
            Source text ending with a newline
        """
        continued: set[int] = set()
        if self.config.group_recursive_types:
            for start, end in self.recursive_spans([name for name, _ in entries], recursive_links):
                continued.update(range(start + 1, end + 1))

        parts = []
        prefix = self.render_prefix()
        if prefix:
            parts.append(prefix)
        for i, (_, declaration) in enumerate(entries):
            keyword = self.CONTINUE_KEYWORD if i in continued else self.DECLARE_KEYWORD
            parts.append(self.render_declaration(declaration, keyword))
        return "\n\n".join(parts) + "\n"

    @staticmethod
    def recursive_spans(names: list[str], recursive_links: Iterable[tuple[str, str]]) -> list[tuple[int, int]]:
        """
        Merge recursive links into disjoint [start, end] index spans.

        A link (source, target) means ``source`` references ``target``,
        which was still being built and is therefore declared later. Self
        references and links to names outside ``names`` need no grouping.
        """
        index = {name: i for i, name in enumerate(names)}
        spans = sorted(
            (index[source], index[target])
            for source, target in recursive_links
            if source in index and target in index and index[target] > index[source]
        )

        merged: list[tuple[int, int]] = []
        for start, end in spans:
            if merged and start <= merged[-1][1]:
                merged[-1] = (merged[-1][0], max(merged[-1][1], end))
            else:
                merged.append((start, end))
        return merged
