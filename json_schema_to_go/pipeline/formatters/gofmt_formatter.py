"""
gofmt formatter for Go code.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from ..config import FormatterConfig
from ..errors import EmissionError
from .base import Formatter

logger = logging.getLogger(__name__)


class GofmtFormatter(Formatter):
    """Formatter piping Go code through gofmt."""

    def __init__(self):
        self._available: dict[str, bool] = {}

    def is_available(self, config: FormatterConfig) -> bool:
        """Check if the gofmt executable is on PATH."""
        if config.command not in self._available:
            self._available[config.command] = shutil.which(config.command) is not None
            if not self._available[config.command]:
                logger.warning("%s not found on PATH, generated code will not be formatted", config.command)
        return self._available[config.command]

    def format(self, code: str, config: FormatterConfig) -> str:
        """
        Format Go code using gofmt.

        Args:
            code: Go source code to format
            config: Formatter configuration

        Returns:
            Formatted code, or `code` unchanged if gofmt is not installed

        Raises:
            EmissionError: If gofmt exits with an error
        """
        if not self.is_available(config):
            return code

        cmd = [config.command]
        if config.simplify:
            cmd.append("-s")

        try:
            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                timeout=30,
            )
        except (subprocess.SubprocessError, OSError) as e:
            raise EmissionError(f"{config.command} failed: {e}") from e

        if result.returncode != 0:
            raise EmissionError(f"{config.command} failed: {result.stderr.strip()}")
        return result.stdout
