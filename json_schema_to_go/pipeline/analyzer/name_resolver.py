"""
Name assigner for schema nodes.

Gives every node that may become a declared type a deterministic name:
map children are named after their key, array items after their array.
"""

from __future__ import annotations

from ..schema_ast.nodes import SchemaNode
from ..session import GenerationSession


class NameAssigner:
    """Assigns names to unnamed nodes of a resolved schema tree."""

    def __init__(self, session: GenerationSession):
        """
        Initialize the assigner.

        Args:
            session: Run state holding the anonymous name counter
        """
        self.session = session

    def assign_root(self, reference_key: str, root: SchemaNode) -> None:
        """Name a document root after its reference key, then name its subtree."""
        if not root.name:
            root.title = reference_key
        self.assign_names(root)

    def assign_names(self, node: SchemaNode) -> None:
        """Name the subtree of `node`. Idempotent."""
        for children in (node.definitions, node.properties, node.pattern_properties):
            for key, child in children.items():
                if not child.name:
                    child.title = key
                self.assign_names(child)

        if node.items is not None:
            if not node.items.name:
                if not node.name:
                    node.title = self.session.next_anonymous_name()
                node.items.title = f"{node.name}Item"
            self.assign_names(node.items)
