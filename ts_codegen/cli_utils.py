"""
CLI utilities for command line reconstruction and the generation header.
"""

from pathlib import Path

import click
import jinja2

PROGRAM_NAME = "ts_codegen"

HEADER_TEMPLATE = Path(__file__).parent / "templates" / "header.ts.jinja2"


def _format_value(value) -> str:
    # Show file paths by name only to keep the header stable across machines
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.exists() else str(value)
    return str(value)


def reconstruct_command_line(click_command: click.Command, program_name: str = PROGRAM_NAME) -> str:
    """
    Rebuild the invoking command line from the current Click context.

    Positional arguments come first, then options that differ from their
    defaults. Flags are written without a value.

    Args:
        click_command: Click command whose parameters are inspected
        program_name: Name to start the command line with

    Returns:
        Reconstructed command line string, or just the program name when no
        Click context is active
    """
    try:
        params = click.get_current_context().params
    except RuntimeError:
        return program_name

    arguments: list[str] = []
    options: list[str] = []

    for param in click_command.params:
        value = params.get(param.name)
        if value is None or value is False or value == ():
            continue

        if isinstance(param, click.Argument):
            arguments.append(_format_value(value))
            continue

        if not isinstance(param, click.Option) or value == param.default:
            continue

        flag = param.opts[0] if param.opts else f"--{param.name}"
        if param.is_flag:
            options.append(flag)
        else:
            options.extend([flag, _format_value(value)])

    return " ".join([program_name, *arguments, *options])


def render_generation_comment(command_line: str, version: str) -> str:
    """Render the generation header comment placed on top of CLI output."""
    env = jinja2.Environment(lstrip_blocks=True, trim_blocks=True, keep_trailing_newline=False)
    template = env.from_string(HEADER_TEMPLATE.read_text(encoding="utf-8"))
    return template.render(command_line=command_line, version=version).rstrip("\n")
