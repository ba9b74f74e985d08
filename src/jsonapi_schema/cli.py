"""Command line interface entry point."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Coroutine
from typing import Any, TypeVar

import click
import jsonref

from jsonapi_schema.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from jsonapi_schema.schema_management import (
    FieldCategory,
    SchemaError,
    SchemaInterface,
    build_schema_interface,
)

T = TypeVar("T")


class CliError(Exception):
    """Custom CLI error."""


def _build_interface(config_path: str) -> SchemaInterface:
    try:
        return build_schema_interface(load_configuration(config_path))
    except (ConfigurationError, SchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc


def _run(coroutine: Coroutine[Any, Any, T]) -> T:
    try:
        return asyncio.run(coroutine)
    except (SchemaError, jsonref.JsonRefError, OSError) as exc:
        raise CliError(str(exc)) from exc
    except RecursionError as exc:
        raise CliError(f"Schema references nest too deeply to resolve: {exc}") from exc


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="jsonapi-schema")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Inspect JSON:API resource schemas."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s"
        )


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML schema configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML schema configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="validate")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON schema configuration file",
)
def validate(config_path: str) -> None:
    """Dereference and validate the configured resource schema."""
    interface = _build_interface(config_path)
    schema = _run(interface.process())
    attributes = len(schema.category_fields(FieldCategory.ATTRIBUTES))
    relationships = len(schema.category_fields(FieldCategory.RELATIONSHIPS))
    click.echo(f"valid: {attributes} attribute(s), {relationships} relationship(s)")


@cli.command(name="fields")
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to YAML/JSON schema configuration file",
)
@click.option(
    "--category",
    "categories",
    multiple=True,
    type=click.Choice(FieldCategory.ALL),
    help="Field category to search; repeatable. Defaults to all categories.",
)
@click.option(
    "--name",
    "names",
    multiple=True,
    help="Field name to return; repeatable. Defaults to every field.",
)
def fields(config_path: str, categories: tuple[str, ...], names: tuple[str, ...]) -> None:
    """Print field definitions of the configured resource schema as JSON."""
    interface = _build_interface(config_path)
    selected = _run(interface.get_fields_by_type(names, categories or FieldCategory.ALL))
    try:
        output = json.dumps(selected, indent=2)
    except ValueError as exc:
        raise CliError(f"Field definitions cannot be printed as JSON: {exc}") from exc
    click.echo(output)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
