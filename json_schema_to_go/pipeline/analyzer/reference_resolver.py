"""
Reference resolver for $ref resolution.

Replaces every $ref node with a copy of the node it points to, following
chains of references, across the whole set of loaded documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..errors import SchemaReferenceError
from ..schema_ast.nodes import SchemaNode
from ..schema_ast.parser import DOCUMENT_SEPARATOR, reference_key_for

logger = logging.getLogger(__name__)

# Path segments that descend into a child map of a node
MAP_SEGMENTS = {
    "definitions": "definitions",
    "properties": "properties",
    "patternProperties": "pattern_properties",
}


@dataclass
class NodeContext:
    """The walk currently points at a schema node."""

    node: SchemaNode


@dataclass
class MapContext:
    """The walk currently points at a keyword map of a node."""

    keyword: str
    children: dict[str, SchemaNode]


Context = NodeContext | MapContext


def _unescape(segment: str) -> str:
    """Decode JSON pointer escapes in a key segment."""
    return segment.replace("~1", "/").replace("~0", "~")


class ReferenceResolver:
    """Resolves $ref nodes against a set of loaded documents."""

    def __init__(self, documents: dict[str, SchemaNode]):
        """
        Initialize the resolver.

        Args:
            documents: Root nodes of every loaded document, by reference key
        """
        self.documents = documents

    def resolve(self, reference_key: str, node: SchemaNode, chain: tuple[str, ...] = ()) -> None:
        """
        Resolve all $refs in the tree rooted at `node`, in place.

        Args:
            reference_key: Key of the document being resolved (for error messages)
            node: The node to resolve
            chain: References currently being expanded above `node`

        Raises:
            SchemaReferenceError: If a reference is malformed, dangling or circular
        """
        if node.ref:
            ref = node.ref
            if ref in chain:
                cycle = " -> ".join((*chain, ref))
                raise SchemaReferenceError(f"circular reference in {reference_key}: {cycle}")
            target = self.lookup(reference_key, ref, node)
            logger.debug("Resolved %s in %s", ref, reference_key)
            node.replace_with(target)
            # The copied content may itself be a reference
            self.resolve(reference_key, node, (*chain, ref))
            return

        for child in node.children():
            self.resolve(reference_key, child, chain)

    def lookup(self, reference_key: str, ref: str, origin: SchemaNode) -> SchemaNode:
        """
        Walk a reference path and return the node it points to.

        Args:
            reference_key: Key of the document being resolved (for error messages)
            ref: The qualified reference, e.g. "a#/definitions/Widget"
            origin: The node holding the reference, where the walk starts

        Returns:
            The referenced node (not a copy)
        """
        context: Context = NodeContext(origin)
        for segment in ref.split("/"):
            if not segment:
                continue
            context = self._step(reference_key, ref, context, segment)

        if not isinstance(context, NodeContext):
            raise SchemaReferenceError(f"reference {ref!r} in {reference_key} does not point to a schema")
        return context.node

    def _step(self, reference_key: str, ref: str, context: Context, segment: str) -> Context:
        if segment == DOCUMENT_SEPARATOR:
            raise SchemaReferenceError(
                f"invalid reference point - please make sure references have file names specified - {reference_key}: {ref!r}"
            )
        if segment.endswith(DOCUMENT_SEPARATOR):
            return NodeContext(self._document(reference_key, segment[:-1]))
        if isinstance(context, MapContext):
            return self._step_map(reference_key, ref, context, segment)
        return self._step_node(reference_key, ref, context, segment)

    def _step_node(self, reference_key: str, ref: str, context: NodeContext, segment: str) -> Context:
        if segment in MAP_SEGMENTS:
            return MapContext(segment, getattr(context.node, MAP_SEGMENTS[segment]))
        if segment == "items":
            if context.node.items is None:
                raise SchemaReferenceError(f"reference {ref!r} in {reference_key}: schema has no items")
            return NodeContext(context.node.items)
        raise SchemaReferenceError(f"reference {ref!r} in {reference_key}: unsupported path segment {segment!r}")

    def _step_map(self, reference_key: str, ref: str, context: MapContext, segment: str) -> Context:
        key = _unescape(segment)
        if key not in context.children:
            raise SchemaReferenceError(f"reference {ref!r} in {reference_key}: no {context.keyword} entry named {key!r}")
        return NodeContext(context.children[key])

    def _document(self, reference_key: str, document_key: str) -> SchemaNode:
        """Find a loaded document by key, accepting a file name for its stem."""
        document = self.documents.get(document_key)
        if document is None:
            document = self.documents.get(reference_key_for(document_key))
        if document is None:
            raise SchemaReferenceError(
                "invalid reference file - please make sure the referenced files are in the processing list - "
                f"{reference_key} ? {document_key}"
            )
        return document
