import json
import logging

import click
from click.core import ParameterSource

from .cli_utils import reconstruct_command_line
from .pipeline import FileSink, GeneratorConfig, SchemaError, SchemaProcessor, StreamSink, expand_patterns

logger = logging.getLogger(__name__)

# CLI parameters named like the GeneratorConfig attribute they set
CONFIG_OVERRIDES = ("output_dir", "package_name", "overwrite", "stdout", "comments")


def load_config(ctx: click.Context, config_path: str | None, params: dict) -> GeneratorConfig:
    """Build the generator config: config file first, then explicit CLI flags."""
    if config_path is not None:
        try:
            with open(config_path) as f:
                config = GeneratorConfig.from_dict(json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            click.echo(f"Error: cannot load config {config_path}: {e}", err=True)
            ctx.exit(1)
    else:
        config = GeneratorConfig()

    for param_name in CONFIG_OVERRIDES:
        if config_path is None or ctx.get_parameter_source(param_name) is not ParameterSource.DEFAULT:
            setattr(config, param_name, params[param_name])
    if config_path is None or ctx.get_parameter_source("fmt") is not ParameterSource.DEFAULT:
        config.formatter.enabled = params["fmt"]
    return config


@click.command()
@click.option("--dir", "output_dir", default="tmp", show_default=True, help="Output directory for go files.")
@click.option("--pkg", "package_name", default="model", show_default=True, help="Package namespace for go files.")
@click.option("--overwrite/--no-overwrite", default=True, show_default=True, help="Overwrite existing go files.")
@click.option("--stdout/--no-stdout", default=False, show_default=True, help="Print go code to stdout rather than files.")
@click.option("--fmt/--no-fmt", "fmt", default=True, show_default=True, help="Pass code through gofmt.")
@click.option("--comments/--no-comments", default=True, show_default=True, help="Add schema comments above declarations.")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log progress to stderr.")
@click.argument("patterns", nargs=-1)
@click.pass_context
def json_schema_to_go(ctx, output_dir, package_name, overwrite, stdout, fmt, comments, config, verbose, patterns):
    """Generate Go structs from the JSON schema files matching PATTERNS."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not patterns:
        click.echo(ctx.get_usage(), err=True)
        click.echo("Error: at least one schema file pattern is required", err=True)
        ctx.exit(1)

    generator_config = load_config(ctx, config, ctx.params)
    logger.debug("Configuration: %s", json.dumps(generator_config.to_dict(), sort_keys=True))

    files = expand_patterns(list(patterns))
    if not files:
        click.echo(f"Error: no schema files match {' '.join(patterns)}", err=True)
        ctx.exit(1)

    if generator_config.stdout:
        sink = StreamSink(generator_config)
    else:
        sink = FileSink(generator_config, command_line=reconstruct_command_line(json_schema_to_go))

    processor = SchemaProcessor(generator_config, sink)
    try:
        processor.load_files(files)
        processor.process()
    except SchemaError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)
