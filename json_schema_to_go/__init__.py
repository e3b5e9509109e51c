"""JSON Schema to Go Generator

A Python package for generating Go struct declarations from sets of
JSON Schema documents, with cross-document $ref resolution, stable
naming of anonymous schemas and gofmt post-processing.
"""

__version__ = "1.0.1"

from .pipeline import (
    CollectingSink,
    DecodeError,
    EmissionError,
    FileSink,
    FormatterConfig,
    GenerationSession,
    GeneratorConfig,
    SchemaError,
    SchemaProcessor,
    SchemaReferenceError,
    StreamSink,
)

__all__ = [
    "SchemaProcessor",
    "GeneratorConfig",
    "FormatterConfig",
    "GenerationSession",
    "CollectingSink",
    "FileSink",
    "StreamSink",
    "SchemaError",
    "DecodeError",
    "SchemaReferenceError",
    "EmissionError",
]
