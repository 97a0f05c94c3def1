"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for parse diagnostics
and binding value listings.
"""

from __future__ import annotations

from typing import Any, NoReturn, Sequence

import typer

from .errors import MicroConfError
from .models.datatypes import Binding, ValueType


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit.

    Parse errors exit with the magnitude of their result code; any other
    failure exits with code 1.
    """

    if isinstance(exc, MicroConfError):
        typer.secho(
            f"{command_name} failed with `{exc.kind.name}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=exc.kind.exit_code) from exc

    typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def format_value(value_type: ValueType, value: Any) -> str:
    """Render one destination value for display."""

    if value is None:
        return "(unset)"
    if value_type is ValueType.BOOL:
        return "true" if value else "false"
    if value_type is ValueType.STRING:
        return f'"{value}"'
    if value_type is ValueType.CHAR:
        return f"'{value}'"
    return repr(value)


def echo_binding_values(bindings: Sequence[Binding]) -> None:
    """Print `key (type) = value` rows in binding order."""

    for binding in bindings:
        rendered = format_value(binding.type, binding.destination.get())
        typer.echo(f"{binding.key} ({binding.type.value}) = {rendered}")
