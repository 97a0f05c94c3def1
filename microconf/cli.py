"""Command-line interface for microconf.

Responsibilities:
- Parse a config file against bindings declared on the command line.
- Run the bundled demonstration schema against a config file.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_binding_values, exit_with_command_error
from .config import OptionsLoader
from .converters import convert_value
from .errors import MicroConfError
from .example import ExampleConfig, example_bindings
from .models.datatypes import Binding, Slot, ValueType
from .parser import load
from .parsing import split_binding_spec
from .telemetry.logger import ParseLogger

app = typer.Typer(
    name="microconf",
    no_args_is_help=True,
    help="microconf CLI.",
)


def _bindings_from_specs(specs: list[str]) -> list[Binding]:
    """Build slot-backed bindings from `KEY:TYPE[=DEFAULT]` specs."""

    bindings: list[Binding] = []
    for spec in specs:
        try:
            key, type_name, default_text = split_binding_spec(spec)
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--bind") from exc
        try:
            value_type = ValueType(type_name)
        except ValueError as exc:
            choices = ", ".join(member.value for member in ValueType)
            raise typer.BadParameter(
                f"Unknown type `{type_name}` in `{spec}`; use one of: {choices}.",
                param_hint="--bind",
            ) from exc

        default = None
        if default_text is not None:
            try:
                default = convert_value(value_type, default_text, key=key)
            except MicroConfError as exc:
                raise typer.BadParameter(
                    f"Default for `{key}` is invalid: {exc.detail}",
                    param_hint="--bind",
                ) from exc
        bindings.append(Binding(value_type, Slot(default), key))
    return bindings


def _run_parse(
    command_name: str,
    bindings: list[Binding],
    path: Path,
    loose_keys: bool,
) -> None:
    """Load options, parse `path` into `bindings` and exit on failure."""

    try:
        options = OptionsLoader.from_env()
    except ValueError as exc:
        exit_with_command_error(command_name, exc)
    if loose_keys:
        options = replace(options, strict_key_boundary=False)

    run_logger = ParseLogger(level=options.log_level, exclusive=True)
    try:
        load(bindings, path, options=options, run_logger=run_logger)
    except MicroConfError as exc:
        exit_with_command_error(command_name, exc)
    finally:
        run_logger.close()


@app.command("check")
def check_command(
    path: Annotated[Path, typer.Argument(help="Path to the config file.")],
    bind: Annotated[
        list[str] | None,
        typer.Option(
            "--bind",
            "-b",
            help="Binding as `KEY:TYPE` or `KEY:TYPE=DEFAULT`; repeat for more keys.",
        ),
    ] = None,
    loose_keys: Annotated[
        bool,
        typer.Option(
            "--loose-keys",
            help="Let a key match lines where it only prefixes a longer word.",
        ),
    ] = False,
) -> None:
    """Parse a config file and print the value of every binding."""

    if not bind:
        raise typer.BadParameter("At least one binding is required.", param_hint="--bind")

    bindings = _bindings_from_specs(bind)
    _run_parse("check", bindings, path, loose_keys)
    echo_binding_values(bindings)


@app.command("example")
def example_command(
    path: Annotated[Path, typer.Argument(help="Path to the config file.")],
) -> None:
    """Parse a config file into the demonstration schema and print it."""

    config = ExampleConfig()
    bindings = example_bindings(config)
    _run_parse("example", bindings, path, loose_keys=False)
    echo_binding_values(bindings)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
