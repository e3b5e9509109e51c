"""
Atomic file writer for safe code generation.

Ensures that an interrupted run never leaves a half-written Go file behind.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from ..errors import EmissionError

# Raw string (struct tag) or interpreted string literal
_LITERAL_PATTERN = re.compile(r'`[^`]*`|"(?:[^"\\\n]|\\.)*"')


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_go: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_go: Optional validation function for Go code
        """
        self._validate_go = validate_go or self._default_validate_go

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            EmissionError: If validation or a file operation fails
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            # Same directory ensures atomic rename on the same filesystem
            temp_fd, temp_path_str = tempfile.mkstemp(
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                text=True,
            )
        except OSError as e:
            raise EmissionError(f"Cannot write {path}: {e}") from e

        temp_path = Path(temp_path_str)
        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                f.write(content)

            if validate:
                self._validate_go(content)

            temp_path.replace(path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise EmissionError(f"Cannot write {path}: {e}") from e
        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _default_validate_go(self, content: str) -> None:
        """Default Go validation.

        Args:
            content: Go code to validate

        Raises:
            EmissionError: If validation fails
        """
        # Basic structural checks (no Go parser available)
        if not content.startswith("package "):
            raise EmissionError("Generated Go code is missing package clause")

        if "type " not in content:
            raise EmissionError("Generated Go code has no type declarations")

        code = "\n".join(line for line in content.splitlines() if not line.lstrip().startswith("//"))
        # Struct tags and string literals carry raw schema keys
        code = _LITERAL_PATTERN.sub("", code)
        open_braces = code.count("{")
        close_braces = code.count("}")
        if open_braces != close_braces:
            raise EmissionError(f"Generated Go code has unbalanced braces: {open_braces} open, {close_braces} close")
