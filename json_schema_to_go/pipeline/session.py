"""
Per-run mutable state shared by the name assigner and the type synthesizer.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GenerationSession:
    """State owned by one generation run.

    Attributes:
        anonymous_count: Number of anonymous names handed out so far
        processed: Type names already emitted in this run
    """

    anonymous_count: int = 0
    processed: dict[str, bool] = field(default_factory=dict)

    def next_anonymous_name(self) -> str:
        self.anonymous_count += 1
        return f"AnonymousObject{self.anonymous_count}"

    def is_processed(self, type_name: str) -> bool:
        return self.processed.get(type_name, False)

    def mark_processed(self, type_name: str) -> bool:
        """Mark a type name as emitted.

        Returns:
            True if the name was not emitted before, False otherwise
        """
        if self.is_processed(type_name):
            return False
        self.processed[type_name] = True
        return True
