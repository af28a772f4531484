"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

PROGRAM_NAME = "schema_to_ts"


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
        return PROGRAM_NAME

    if not cli_args:
        return PROGRAM_NAME

    arguments = []
    options = []

    for param in click_command.params:
        value = cli_args.get(param.name)
        if value is None or value == () or value == "":
            continue

        if isinstance(param, click.Argument):
            arguments.append(_format_value(value))
            continue

        if not isinstance(param, click.Option) or value == param.default:
            continue

        if param.is_flag and param.secondary_opts:
            # --deep/--no-deep style switches
            options.append(param.opts[0] if value else param.secondary_opts[0])
        elif param.is_flag:
            options.append(param.opts[0])
        elif param.multiple:
            for item in value:
                options.extend([param.opts[0], _format_value(item)])
        else:
            options.extend([param.opts[0], _format_value(value)])

    return " ".join([PROGRAM_NAME] + arguments + options)


def _format_value(value) -> str:
    # File paths are shown as bare file names for stable generation comments
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.exists() else str(value)
    return str(value)
