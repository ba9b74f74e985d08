"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, SchemaConfig

_BOOLEAN_DEREF_OPTIONS = ("jsonschema", "merge_props", "proxies", "lazy_load", "load_on_repr")
_DEREF_OPTIONS = ("base_uri", *_BOOLEAN_DEREF_OPTIONS)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    schema = _parse_schema_section(parsed.get("schema"), path.parent)
    deref = _parse_deref_section(parsed.get("deref"), schema)

    return Configuration(path=path, schema=schema, deref=deref)


def _parse_schema_section(value: Any, base_path: Path) -> SchemaConfig:
    section = _require_mapping(value, "schema")
    inline = section.get("inline")
    path_value = section.get("path")
    if inline and path_value:
        raise ConfigurationError("Schema definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("schema.inline must be a string.")
        text, source_path = inline, None
    elif path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("schema.path must be a string.")
        source_path = _resolve_path(base_path, path_value)
        if not source_path.exists():
            raise ConfigurationError(f"Schema file not found: {source_path}")
        text = source_path.read_text(encoding="utf-8")
    else:
        raise ConfigurationError("Schema definition requires either inline or path.")

    if not text.strip():
        raise ConfigurationError("Schema text cannot be empty.")
    return SchemaConfig(text=text, source_path=source_path)


def _parse_deref_section(value: Any, schema: SchemaConfig) -> dict[str, Any]:
    if value is None:
        section: Mapping[str, Any] = {}
    elif isinstance(value, Mapping):
        section = value
    else:
        raise ConfigurationError("deref must be a mapping.")

    options = dict(section)
    unknown = [str(option) for option in options if option not in _DEREF_OPTIONS]
    if unknown:
        raise ConfigurationError(
            f"Unsupported deref option(s): {', '.join(unknown)}. "
            f"Supported options: {', '.join(_DEREF_OPTIONS)}."
        )
    for option in _BOOLEAN_DEREF_OPTIONS:
        if option in options and not isinstance(options[option], bool):
            raise ConfigurationError(f"deref.{option} must be a boolean.")

    base_uri = options.get("base_uri")
    if base_uri is not None and not isinstance(base_uri, str):
        raise ConfigurationError("deref.base_uri must be a string.")
    if base_uri is None and schema.source_path is not None:
        options["base_uri"] = schema.source_path.as_uri()
    return options


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value
