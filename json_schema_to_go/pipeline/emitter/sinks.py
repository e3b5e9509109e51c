"""
Emission sinks: where rendered Go declarations end up.
"""

from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, metadata
from pathlib import Path
from typing import TextIO

from ...rendering import create_environment, load_template
from ..config import GeneratorConfig
from ..errors import EmissionError
from ..formatters import Formatter, GofmtFormatter
from .atomic_writer import AtomicWriter
from .base import EmissionSink

logger = logging.getLogger(__name__)

TOOL_NAME = "json_schema_to_go"


def project_url() -> str:
    """Home page declared in the installed distribution's metadata, or ""."""
    try:
        meta = metadata(TOOL_NAME)
    except PackageNotFoundError:
        return ""
    url = meta.get("Home-page") or ""
    return "" if url == "UNKNOWN" else url


class CollectingSink(EmissionSink):
    """Keeps emitted declarations in memory, in emission order."""

    def __init__(self):
        self.declarations: dict[str, str] = {}

    def emit(self, type_name: str, code: str) -> None:
        self.declarations[type_name] = code


class StreamSink(EmissionSink):
    """Writes declarations to a text stream (stdout by default)."""

    def __init__(self, config: GeneratorConfig, stream: TextIO | None = None, formatter: Formatter | None = None):
        self.config = config
        self.stream = stream
        self.formatter = formatter or GofmtFormatter()

    def emit(self, type_name: str, code: str) -> None:
        if self.config.formatter.enabled:
            code = self.formatter.format(code, self.config.formatter)
        stream = self.stream or sys.stdout
        try:
            stream.write(code)
            stream.write("\n")
        except OSError as e:
            raise EmissionError(f"Cannot write {type_name}: {e}") from e


class FileSink(EmissionSink):
    """Writes each declaration to `<output_dir>/<TypeName>.go`."""

    def __init__(
        self,
        config: GeneratorConfig,
        command_line: str = TOOL_NAME,
        formatter: Formatter | None = None,
        writer: AtomicWriter | None = None,
    ):
        """
        Initialize the sink.

        Args:
            config: Generator configuration (output dir, package, overwrite, formatter)
            command_line: Invocation recorded in the provenance header
            formatter: Formatter used when formatting is enabled
            writer: Writer used to put files in place
        """
        self.config = config
        self.command_line = command_line
        self.formatter = formatter or GofmtFormatter()
        self.writer = writer or AtomicWriter()
        self.preamble = load_template(create_environment(), "preamble")

    def path_for(self, type_name: str) -> Path:
        return Path(self.config.output_dir) / f"{type_name}.go"

    def emit(self, type_name: str, code: str) -> None:
        path = self.path_for(type_name)
        if not self.config.overwrite and path.exists():
            logger.info("File %s already exists, skipping without --overwrite", path)
            return

        content = self.render_file(code)
        if self.config.formatter.enabled:
            content = self.formatter.format(content, self.config.formatter)
        self.writer.write(path, content, validate=self.config.validate_before_write)
        logger.info("Wrote %s", path)

    def render_file(self, code: str) -> str:
        """Prefix a declaration with the package clause and provenance header."""
        header = self.preamble.render(
            package_name=self.config.package_name,
            tool_name=TOOL_NAME,
            project_url=project_url(),
            command_line=self.command_line,
        )
        return header + code
