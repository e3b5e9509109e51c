"""
Configuration for the Go struct generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FormatterConfig:
    """Configuration for the post-processing formatter."""

    # Whether formatting is enabled
    enabled: bool = True

    # Formatter executable
    command: str = "gofmt"

    # Pass -s (simplify code)
    simplify: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Directory generated files are written to
    output_dir: str = "tmp"

    # Go package name written at the top of each generated file
    package_name: str = "model"

    # Whether existing files may be overwritten
    overwrite: bool = True

    # Write declarations to stdout instead of files
    stdout: bool = False

    # Add the source schema as a comment above each declaration
    comments: bool = True

    # Check generated files before putting them in place
    validate_before_write: bool = True

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary."""
        config = GeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "output_dir": self.output_dir,
            "package_name": self.package_name,
            "overwrite": self.overwrite,
            "stdout": self.stdout,
            "comments": self.comments,
            "validate_before_write": self.validate_before_write,
            "formatter": {
                "enabled": self.formatter.enabled,
                "command": self.formatter.command,
                "simplify": self.formatter.simplify,
            },
        }
