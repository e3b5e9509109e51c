"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

COMMAND_NAME = "json_schema_to_go"


def _format_value(value) -> str:
    """Format a parameter value (file paths are shortened to their name)."""
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.is_absolute() and path_obj.exists() else str(value)
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct command line from current Click context using introspection.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
        cli_args = ctx.params
    except RuntimeError:
        # No active context, return basic command
        return COMMAND_NAME

    if not cli_args:
        return COMMAND_NAME

    cmd_parts = [COMMAND_NAME]
    arguments = []  # For positional arguments
    options = []  # For optional arguments

    for param in click_command.params:
        param_name = param.name
        if param_name not in cli_args:
            continue
        value = cli_args[param_name]

        if isinstance(param, click.Argument):
            values = value if isinstance(value, tuple) else (value,)
            arguments.extend(_format_value(v) for v in values if v is not None)

        elif isinstance(param, click.Option):
            # Skip values left at their default
            if value is None or value == param.default:
                continue
            if param.is_flag:
                if param.secondary_opts and not value:
                    options.append(param.secondary_opts[0])
                else:
                    options.append(param.opts[0])
            else:
                options.extend([param.opts[0], _format_value(value)])

    # Combine: command + options + arguments
    cmd_parts.extend(options)
    cmd_parts.extend(arguments)

    return " ".join(cmd_parts)
