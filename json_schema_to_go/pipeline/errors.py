"""
Error types raised by the generator pipeline.

Every error is fatal: it is raised where it is detected and propagated
unchanged to the caller, which aborts the run.
"""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for all generator errors."""


class DecodeError(SchemaError):
    """Raised when a document is not valid JSON or uses an unknown schema type."""


class SchemaReferenceError(SchemaError):
    """Raised when a $ref cannot be resolved against the loaded documents."""


class EmissionError(SchemaError):
    """Raised when a declaration cannot be written or formatted."""
