"""
Schema tree: node definitions and the document loader.
"""

from __future__ import annotations

from .nodes import SchemaKind, SchemaNode
from .parser import SchemaLoader, qualify_reference, reference_key_for

__all__ = [
    "SchemaKind",
    "SchemaNode",
    "SchemaLoader",
    "qualify_reference",
    "reference_key_for",
]
