"""
Emitter module: persistence of rendered declarations.

Provides sinks for files (with provenance header and atomic writes),
streams and in-memory collection.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .base import EmissionSink
from .sinks import CollectingSink, FileSink, StreamSink

__all__ = [
    "EmissionSink",
    "CollectingSink",
    "FileSink",
    "StreamSink",
    "AtomicWriter",
]
