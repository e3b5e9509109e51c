"""
JSON Schema loader that builds a SchemaNode tree.

Phase 1 of the pipeline: decode one document and normalize it on its own,
without looking at any other document:

1. Definition titling: unnamed definitions are titled after their key
2. Reference qualification: same-document $refs get the document's key
"""

from __future__ import annotations

import json
from pathlib import Path

from ..errors import DecodeError
from .nodes import SchemaNode

# Separates the document key from the path inside the document in a $ref
DOCUMENT_SEPARATOR = "#"


def reference_key_for(path: str | Path) -> str:
    """Reference key of an input file: its name without extension."""
    return Path(path).stem


def qualify_reference(ref: str, reference_key: str) -> str:
    """
    Make a $ref name the document it points into.

    "#/definitions/Foo" -> "<key>#/definitions/Foo"
    "/definitions/Foo" -> "<key>#/definitions/Foo"
    "other#/definitions/Foo" is returned unchanged.
    """
    if not ref:
        return ref
    if ref.startswith(DOCUMENT_SEPARATOR):
        return reference_key + ref
    if DOCUMENT_SEPARATOR not in ref:
        return reference_key + DOCUMENT_SEPARATOR + ref
    return ref


class SchemaLoader:
    """Loads schema documents into SchemaNode trees."""

    def load(self, raw: bytes | str, reference_key: str) -> SchemaNode:
        """
        Decode a schema document and normalize it.

        Args:
            raw: The document contents
            reference_key: Key other documents use to reference this one

        Returns:
            The root SchemaNode of the document

        Raises:
            DecodeError: If the document is not valid JSON or not a valid schema
        """
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError(f"{reference_key}: invalid JSON: {e}") from e

        try:
            root = SchemaNode.from_dict(data)
        except DecodeError as e:
            raise DecodeError(f"{reference_key}: {e}") from e

        self.title_definitions(root)
        self.qualify_references(root, reference_key)
        return root

    def title_definitions(self, node: SchemaNode) -> None:
        """Title every unnamed definition after its key, recursively."""
        for key, definition in node.definitions.items():
            if not definition.name:
                definition.title = key
            self.title_definitions(definition)

    def qualify_references(self, node: SchemaNode, reference_key: str) -> None:
        """Prefix same-document $refs with `reference_key`, in the whole tree."""
        for child in node.children():
            self.qualify_references(child, reference_key)
        node.ref = qualify_reference(node.ref, reference_key)
