"""Raw schema loading from configured sources."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

from jsonapi_schema.configuration.runtime_settings import Configuration, SchemaConfig

from .dereferencing import ResolutionService
from .schema_errors import SchemaLoadError
from .schema_interface import SchemaInterface

_YAML_SUFFIXES = (".yaml", ".yml")


def load_raw_schema(config: SchemaConfig) -> Mapping[str, Any]:
    """Parse configured schema text into a raw schema mapping."""
    is_yaml = config.source_path is not None and config.source_path.suffix in _YAML_SUFFIXES
    try:
        root = yaml.safe_load(config.text) if is_yaml else json.loads(config.text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SchemaLoadError(f"Invalid schema {_describe_source(config)}: {exc}") from exc

    if not isinstance(root, Mapping):
        raise SchemaLoadError(f"Schema root must be an object: {_describe_source(config)}")
    return root


def build_schema_interface(
    configuration: Configuration, *, resolution_service: ResolutionService | None = None
) -> SchemaInterface:
    """Create a schema interface for the configured schema and deref options."""
    return SchemaInterface(
        load_raw_schema(configuration.schema),
        configuration.interface_config(),
        resolution_service=resolution_service,
    )


def _describe_source(config: SchemaConfig) -> str:
    return str(config.source_path) if config.source_path is not None else "(inline)"
