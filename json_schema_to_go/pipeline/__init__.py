"""
Pipeline - JSON Schema to Go struct generator.

This module provides a multi-phase architecture for generating Go type
declarations from a set of JSON schema documents:

1. Phase 1 (Loader): Parse each document into a SchemaNode tree and
   qualify same-document references
2. Phase 2 (Analyzer): Resolve $refs across documents and assign names
3. Phase 3 (Backend): Synthesize Go declarations, once per type name
4. Phase 4 (Formatter): Optional post-processing with gofmt
5. Phase 5 (Emitter): Write declarations to files or a stream
"""

from __future__ import annotations

from .config import FormatterConfig, GeneratorConfig
from .emitter import AtomicWriter, CollectingSink, EmissionSink, FileSink, StreamSink
from .errors import DecodeError, EmissionError, SchemaError, SchemaReferenceError
from .generator import SchemaProcessor, expand_patterns
from .session import GenerationSession

__all__ = [
    "SchemaProcessor",
    "expand_patterns",
    "GeneratorConfig",
    "FormatterConfig",
    "GenerationSession",
    "EmissionSink",
    "CollectingSink",
    "FileSink",
    "StreamSink",
    "AtomicWriter",
    "SchemaError",
    "DecodeError",
    "SchemaReferenceError",
    "EmissionError",
]
