"""Command line entry point: read single keys or dump a resolved file."""

import logging
from enum import Enum
from pathlib import Path

import typer
import yaml

from .exceptions import ConfigError
from .loader import load

app = typer.Typer(add_completion=False, help="Read TIDE configuration files.")


class Accessor(str, Enum):
    STRING = "string"
    BOOL = "bool"
    INT = "int"
    INT32 = "int32"
    INT64 = "int64"
    ARRAY = "array"
    INT_ARRAY = "int-array"


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def get(
    file: Path = typer.Argument(..., help="Configuration file to load"),
    key: str = typer.Argument(..., help="Dotted key, e.g. database.port"),
    as_type: Accessor = typer.Option(Accessor.STRING, "--as", help="Accessor used to read the key"),
):
    """Print one value, environment overrides applied."""
    try:
        store = load(file)
        getter = {
            Accessor.STRING: store.get_string,
            Accessor.BOOL: store.get_bool,
            Accessor.INT: store.get_int,
            Accessor.INT32: store.get_int32,
            Accessor.INT64: store.get_int64,
            Accessor.ARRAY: store.get_array,
            Accessor.INT_ARRAY: store.get_int_array,
        }[as_type]
        value = getter(key)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if isinstance(value, list):
        for item in value:
            typer.echo(item)
    elif isinstance(value, bool):
        typer.echo("true" if value else "false")
    else:
        typer.echo(value)


@app.command()
def dump(
    file: Path = typer.Argument(..., help="Configuration file to load"),
    nested: bool = typer.Option(False, "--nested", help="Print blocks as nested mappings"),
):
    """Print every stored key as YAML (environment overrides not applied)."""
    try:
        data = load(file).to_dict(nested=nested)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), nl=False)


if __name__ == "__main__":
    app()
