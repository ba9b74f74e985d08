"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "jsonapi-schema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Schema configuration template for jsonapi-schema.
# Replace every <REQUIRED> placeholder before running validate or fields.
# Remove <OPTIONAL> entries your setup does not need.

schema:
  # Provide either an inline schema (JSON text) or a schema file path.
  # Relative paths resolve against this file's directory.
  path: "<REQUIRED>"
  # inline: "<OPTIONAL>"

deref:
  # Options passed to the reference resolver.
  # base_uri defaults to the schema file location when schema.path is set.
  # base_uri: "<OPTIONAL>"
  # Honour JSON-Schema "id"/"$id" scoping when resolving references.
  jsonschema: false
  # Merge sibling keys of a "$ref" object into the resolved definition.
  merge_props: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML schema configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
