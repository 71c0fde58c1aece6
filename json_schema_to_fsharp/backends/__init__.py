"""
Declaration emitters.

Contains language-specific renderers for the IR.
"""

from __future__ import annotations

from .base import Emitter
from .fsharp_backend import FSharpBackend

__all__ = [
    "Emitter",
    "FSharpBackend",
]
