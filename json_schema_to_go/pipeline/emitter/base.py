"""
Base class for emission sinks.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class EmissionSink(ABC):
    """Receives rendered declarations, one per named type."""

    @abstractmethod
    def emit(self, type_name: str, code: str) -> None:
        """
        Persist one declaration.

        Args:
            type_name: Name of the declared type
            code: Rendered declaration

        Raises:
            EmissionError: If the declaration cannot be written or formatted
        """
