"""
Analyzer: cross-document reference resolution and name assignment.
"""

from __future__ import annotations

from .name_resolver import NameAssigner
from .reference_resolver import MapContext, NodeContext, ReferenceResolver

__all__ = [
    "NameAssigner",
    "ReferenceResolver",
    "NodeContext",
    "MapContext",
]
