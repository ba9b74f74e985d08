"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from jsonapi_schema.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["fields", "--name", "title"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_category_returns_clean_click_error(capsys) -> None:
    exit_code = main(["fields", "--config", "x.yaml", "--category", "links"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Invalid value for '--category'" in captured.err


def test_missing_configuration_returns_error_message(tmp_path: Path, capsys) -> None:
    exit_code = main(["validate", "--config", str(tmp_path / "absent.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err
