"""
Backends that turn schema nodes into target language declarations.
"""

from __future__ import annotations

from .go_backend import GoBackend

__all__ = [
    "GoBackend",
]
