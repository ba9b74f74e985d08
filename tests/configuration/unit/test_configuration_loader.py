"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from jsonapi_schema.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_inline_schema(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
schema:
  inline: |
    {"required": ["id", "type"]}
deref:
  merge_props: true
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.schema.text.startswith("{")
    assert configuration.schema.source_path is None
    assert configuration.deref == {"merge_props": True}
    assert configuration.interface_config() == {"deref": {"merge_props": True}}


def test_loads_json_configuration_with_schema_path(tmp_path: Path) -> None:
    schemas = tmp_path / "schemas"
    schemas.mkdir()
    schema_path = _write_file(schemas / "article.json", '{"required": []}')
    config_path = _write_file(
        tmp_path / "config.json", json.dumps({"schema": {"path": "schemas/article.json"}})
    )

    configuration = load_configuration(config_path)

    assert configuration.schema.source_path == schema_path.resolve()
    assert configuration.schema.text == '{"required": []}'
    assert configuration.deref == {"base_uri": schema_path.resolve().as_uri()}


def test_explicit_base_uri_is_kept(tmp_path: Path) -> None:
    _write_file(tmp_path / "article.json", "{}")
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
schema:
  path: article.json
deref:
  base_uri: "https://schemas.example.com/article.json"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.deref == {"base_uri": "https://schemas.example.com/article.json"}


def test_missing_configuration_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "absent.yaml")


def test_configuration_root_must_be_a_mapping(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "- schema\n")

    with pytest.raises(ConfigurationError, match="Configuration root must be a mapping."):
        load_configuration(config_path)


def test_schema_section_is_required(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "deref: {}\n")

    with pytest.raises(ConfigurationError, match="Configuration section 'schema' is required."):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("schema_section", "message"),
    [
        ({"inline": "{}", "path": "a.json"}, "must not set both inline and path"),
        ({}, "requires either inline or path"),
        ({"inline": ["{}"]}, "schema.inline must be a string."),
        ({"path": 3}, "schema.path must be a string."),
        ({"path": "missing.json"}, "Schema file not found"),
        ({"inline": "   "}, "Schema text cannot be empty."),
    ],
)
def test_rejects_invalid_schema_sections(
    tmp_path: Path, schema_section: dict, message: str
) -> None:
    config_path = _write_file(tmp_path / "config.json", json.dumps({"schema": schema_section}))

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)


@pytest.mark.parametrize(
    ("deref_section", "message"),
    [
        ("yes", "deref must be a mapping."),
        ({"jsonschema": "true"}, "deref.jsonschema must be a boolean."),
        ({"merge_props": 1}, "deref.merge_props must be a boolean."),
        ({"base_uri": 5}, "deref.base_uri must be a string."),
        ({"load_on_repr": "no"}, "deref.load_on_repr must be a boolean."),
        ({"bogus": 1, "loader": "x"}, r"Unsupported deref option\(s\): bogus, loader\."),
    ],
)
def test_rejects_invalid_deref_sections(tmp_path: Path, deref_section, message: str) -> None:
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps({"schema": {"inline": "{}"}, "deref": deref_section}),
    )

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
