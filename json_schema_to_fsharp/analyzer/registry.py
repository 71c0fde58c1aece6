"""
Type registry for $ref resolution.

Owns the referenceable definitions of a schema, memoizes resolved
declarations and breaks cycles between self- and mutually-recursive types.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from ..errors import ExternalTypeNotAvailable
from ..schema_ast.nodes import SchemaNode
from ..utils import strip_ref_prefix
from .ir_nodes import Declaration

if TYPE_CHECKING:
    from ..backends.base import Emitter

logger = logging.getLogger(__name__)

DEFAULT_REF_PREFIXES = ["#/definitions/", "#/$defs/"]


class TypeRegistry:
    """Registry of known, pending and resolved types for one generation run."""

    def __init__(self, ref_prefixes: list[str] | None = None):
        """
        Initialize an empty registry.

        Args:
            ref_prefixes: Pointer prefixes stripped from $ref values
        """
        self.ref_prefixes = ref_prefixes if ref_prefixes is not None else list(DEFAULT_REF_PREFIXES)

        # name -> declaration, in first-resolution order
        self.resolved: dict[str, Declaration] = {}

        # names currently being resolved (recursion guard)
        self.in_progress: set[str] = set()

        # name -> raw definition, never removed
        self.pending: dict[str, SchemaNode] = {}

        # (declaration being built, in-progress name it referenced), one per cycle hit
        self.recursive_links: list[tuple[str, str]] = []

        # declarations currently being built, innermost last
        self._building: list[str] = []

        # inline names handed out by reserve_name
        self._reserved: set[str] = set()

    def add_pending(self, definitions: dict[str, SchemaNode]) -> None:
        """Seed pending definitions. Existing entries are kept."""
        for name, node in definitions.items():
            self.pending.setdefault(name, node)

    @contextmanager
    def building(self, name: str, in_progress: bool = False) -> Iterator[None]:
        """
        Track the declaration being built for the duration of the block.

        Args:
            name: Name of the declaration being built
            in_progress: Also mark the name in progress, so that references
                to it return the name instead of resolving again
        """
        self._building.append(name)
        if in_progress:
            self.in_progress.add(name)
        try:
            yield
        finally:
            self._building.pop()
            if in_progress:
                self.in_progress.discard(name)

    def resolve(self, reference: str, build: Callable[[str, SchemaNode], Declaration], source_path: str = "") -> str:
        """
        Resolve a $ref to a declaration name, building it on first use.

        Args:
            reference: The raw $ref value
            build: Callback producing the declaration for (name, definition node)
            source_path: Location of the referencing node (for error messages)

        Returns:
            The declaration name
        """
        name = strip_ref_prefix(reference, self.ref_prefixes)

        if name in self.in_progress:
            logger.debug("Cycle on %s, returning name without resolving", name)
            if self._building:
                self.recursive_links.append((self._building[-1], name))
            return name

        if name in self.resolved:
            return name

        node = self.pending.get(name)
        if node is None:
            raise ExternalTypeNotAvailable(f"no definition named '{name}' for reference '{reference}'", source_path)

        logger.debug("Resolving definition %s", name)
        with self.building(name, in_progress=True):
            declaration = build(name, node)
        self.register(name, declaration)
        return name

    def reserve_name(self, name: str) -> str:
        """
        Reserve a unique name for an inline type before it is built.

        A name already resolved, reserved, being built or belonging to a
        pending definition is taken; the first free ``<name>2``,
        ``<name>3``, ... is used instead.

        Returns:
            The reserved name
        """
        candidate = name
        suffix = 1
        while self._is_taken(candidate):
            suffix += 1
            candidate = f"{name}{suffix}"
        if candidate != name:
            logger.debug("Type name %s is taken, using %s", name, candidate)
        self._reserved.add(candidate)
        return candidate

    def _is_taken(self, name: str) -> bool:
        return (
            name in self.resolved
            or name in self._reserved
            or name in self.pending
            or name in self.in_progress
            or name in self._building
        )

    def register_anonymous(self, name: str, declaration: Declaration) -> str:
        """
        Register a synthesized declaration for an inline type.

        Anonymous types bypass pending and in_progress since nothing can
        reference them by pointer. ``name`` comes from ``reserve_name``.

        Returns:
            The declaration name
        """
        logger.debug("Registering anonymous type %s", name)
        self.register(name, declaration)
        return name

    def register(self, name: str, declaration: Declaration) -> None:
        """Insert a built declaration. Resolved declarations are never replaced."""
        if name in self.resolved:
            raise ValueError(f"Type name {name} is already resolved")
        self.resolved[name] = declaration

    def resolved_definitions(self, emitter: Emitter | None = None) -> list[tuple[str, str]]:
        """
        Render every resolved declaration.

        Args:
            emitter: Emitter used for rendering (default: F# backend)

        Returns:
            (name, text) pairs in first-resolved order
        """
        if emitter is None:
            from ..backends.fsharp_backend import FSharpBackend

            emitter = FSharpBackend()
        return [(name, emitter.render_declaration(declaration)) for name, declaration in self.resolved.items()]
