"""
Schema processor: drives the pipeline over a set of schema documents.

1. Load every document (decode, title definitions, qualify $refs)
2. Resolve $refs across the document set
3. Assign names
4. Synthesize Go declarations, root by root, in input order
"""

from __future__ import annotations

import glob
import logging
from pathlib import Path

from .analyzer import NameAssigner, ReferenceResolver
from .backends import GoBackend
from .config import GeneratorConfig
from .emitter import CollectingSink, EmissionSink
from .errors import DecodeError
from .schema_ast import SchemaLoader, SchemaNode, reference_key_for
from .session import GenerationSession

logger = logging.getLogger(__name__)


def expand_patterns(patterns: list[str]) -> list[str]:
    """Expand glob patterns into a list of files, keeping pattern order."""
    files: list[str] = []
    for pattern in patterns:
        for match in sorted(glob.glob(pattern)):
            if match not in files:
                files.append(match)
    return files


class SchemaProcessor:
    """Converts a set of JSON schema documents into Go declarations."""

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        sink: EmissionSink | None = None,
        session: GenerationSession | None = None,
    ):
        """
        Initialize the processor.

        Args:
            config: Generator configuration
            sink: Where declarations are emitted (in memory by default)
            session: Run state; a fresh one by default
        """
        self.config = config or GeneratorConfig()
        self.sink = sink if sink is not None else CollectingSink()
        self.session = session or GenerationSession()
        self.loader = SchemaLoader()
        # Reference key -> root node, in load order
        self.documents: dict[str, SchemaNode] = {}

    def load_files(self, paths: list[str | Path]) -> None:
        """
        Load schema files into the document set.

        Raises:
            DecodeError: If a file cannot be read or decoded
        """
        for path in paths:
            try:
                raw = Path(path).read_bytes()
            except OSError as e:
                raise DecodeError(f"Cannot read {path}: {e}") from e
            self.load_document(raw, reference_key_for(path))

    def load_document(self, raw: bytes | str, reference_key: str) -> SchemaNode:
        """Load one document under `reference_key`."""
        logger.debug("Loading schema %s", reference_key)
        root = self.loader.load(raw, reference_key)
        self.documents[reference_key] = root
        return root

    def process(self) -> list[str]:
        """
        Resolve, name and synthesize every loaded document.

        Returns:
            The Go type reference of each document root, in load order
        """
        resolver = ReferenceResolver(self.documents)
        assigner = NameAssigner(self.session)
        for reference_key, root in self.documents.items():
            resolver.resolve(reference_key, root)
        # Names only after every document is resolved, so copies never carry assigned names
        for reference_key, root in self.documents.items():
            assigner.assign_root(reference_key, root)

        backend = GoBackend(self.config, self.sink, self.session)
        type_refs = []
        for reference_key, root in self.documents.items():
            type_ref = backend.synthesize(root)
            logger.info("Processed %s as %s", reference_key, type_ref)
            type_refs.append(type_ref)
        return type_refs
