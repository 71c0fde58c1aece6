"""
Entry points of the declaration generator.

``generate`` translates one root schema into its declaration, leaving
every declaration discovered on the way in the registry.
``TypeGenerator`` produces a complete F# source file from a JSON Schema
document.
"""

from __future__ import annotations

import logging
from typing import Any

from .analyzer import Declaration, SchemaAnalyzer, TypeRegistry
from .backends import FSharpBackend
from .config import GeneratorConfig
from .schema_ast import RootSchema, SchemaParser

logger = logging.getLogger(__name__)


def resolve_root(
    root: RootSchema,
    registry: TypeRegistry,
    analyzer: SchemaAnalyzer,
    name: str | None = None,
) -> tuple[str, Declaration]:
    """
    Build the declaration of a root schema.

    The root is marked in progress while it is translated so that
    references back to it resolve to its name. It is registered after all
    the declarations it depends on.

    Args:
        root: Root schema and its definitions
        registry: Registry of the current generation run
        analyzer: Analyzer building declarations
        name: Fallback name when the root has no title

    Returns:
        (root name, root declaration)
    """
    registry.add_pending(root.definitions)
    root_name = analyzer.name_resolver.resolve(root.schema, name)

    cached = registry.resolved.get(root_name)
    if cached is not None:
        logger.debug("Root %s already resolved", root_name)
        return root_name, cached

    logger.info("Generating declarations for %s", root_name)
    with registry.building(root_name, in_progress=True):
        declaration = analyzer.translate_definition(root.schema, root_name, registry)
    registry.register(root_name, declaration)
    return root_name, declaration


def generate(
    root: RootSchema | dict[str, Any],
    registry: TypeRegistry,
    name: str | None = None,
    config: GeneratorConfig | None = None,
) -> str:
    """
    Translate a root schema into its declaration text.

    Declarations of referenced and inline types are left in ``registry``
    (see ``TypeRegistry.resolved_definitions``).

    Args:
        root: Parsed root schema, or a JSON Schema dictionary
        registry: Registry shared by the generation calls of one run
        name: Fallback name when the root has no title
        config: Generator configuration (rendering options)

    Returns:
        The root declaration text
    """
    if isinstance(root, dict):
        root = SchemaParser().parse(root)
    _, declaration = resolve_root(root, registry, SchemaAnalyzer(), name)
    return FSharpBackend(config).render_declaration(declaration)


class TypeGenerator:
    """Generates a complete F# source file from a JSON Schema document."""

    def __init__(self, name: str | None, schema: dict[str, Any], config: GeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            name: Fallback name for the root type when the schema has no title
            schema: The JSON Schema dictionary
            config: Generator configuration
        """
        self.name = name
        self.schema = schema
        self.config = config or GeneratorConfig()

    def generate(self) -> str:
        """Generate the source file: every referenced declaration, then the root."""
        registry = TypeRegistry(self.config.ref_prefixes)
        root = SchemaParser().parse(self.schema)
        resolve_root(root, registry, SchemaAnalyzer(), self.name)
        entries = list(registry.resolved.items())
        return FSharpBackend(self.config).render_module(entries, registry.recursive_links)
