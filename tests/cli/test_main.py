# Copyright 2026 gqltypes Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the gqltypes CLI entry point."""

import sys
from pathlib import Path

import pytest

from gqltypes.cli.main import main

# ###############
# Helpers
# ###############

SCHEMA = """\
types:
  - kind: object
    name: FieldTrip
    fields:
      id:
        type: {kind: non_null, of_type: ID}
      name:
        type: String
  - kind: enum
    name: Continent
    values:
      EUROPE: eu
"""


def _write_schema(tmp_path: Path, content: str = SCHEMA) -> Path:
    schema_file = tmp_path / "schema.yaml"
    schema_file.write_text(content, encoding="utf-8")
    return schema_file


def _run(monkeypatch: pytest.MonkeyPatch, *argv: str) -> int:
    """Run main() with *argv* and return its exit code."""
    monkeypatch.setattr(sys, "argv", ["gqltypes", *argv])
    with pytest.raises(SystemExit) as exc_info:
        main()
    return exc_info.value.code


def test_main_no_args_prints_help_and_exits(monkeypatch: pytest.MonkeyPatch) -> None:
    """main() with no subcommand prints help and exits with code 0."""
    assert _run(monkeypatch) == 0


# -------- check tests --------


def test_check_valid_schema(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    assert _run(monkeypatch, "check", str(_write_schema(tmp_path))) == 0
    assert "Schema is valid: 7 named type(s)." in capsys.readouterr().out


def test_check_reports_issues(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    content = "types:\n  - kind: object\n    name: Trip\n    fields:\n      venue:\n        type: Venue\n"
    assert _run(monkeypatch, "check", str(_write_schema(tmp_path, content))) == 1
    assert "unknown type 'Venue'" in capsys.readouterr().err


def test_check_missing_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    assert _run(monkeypatch, "check", str(tmp_path / "missing.yaml")) == 1
    assert "not found" in capsys.readouterr().err


# -------- describe tests --------


def test_describe_object(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    assert _run(monkeypatch, "describe", str(_write_schema(tmp_path)), "FieldTrip") == 0
    out = capsys.readouterr().out
    assert "FieldTrip: object" in out
    assert "composite  yes" in out
    assert "input      no" in out
    assert ".id: ID!" in out


def test_describe_builtin_scalar(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    assert _run(monkeypatch, "describe", str(_write_schema(tmp_path)), "Int") == 0
    out = capsys.readouterr().out
    assert "Int: scalar" in out
    assert "leaf       yes" in out


def test_describe_unknown_type(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    assert _run(monkeypatch, "describe", str(_write_schema(tmp_path)), "Venue") == 1
    assert "unknown type 'Venue'" in capsys.readouterr().err


# -------- validate tests --------


def test_validate_valid_value(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    assert _run(monkeypatch, "validate", str(_write_schema(tmp_path)), "Continent", '"EUROPE"') == 0
    assert "Valid input for Continent." in capsys.readouterr().out


def test_validate_invalid_value(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    assert _run(monkeypatch, "validate", str(_write_schema(tmp_path)), "Int", '"3"') == 1
    assert "Invalid input for Int." in capsys.readouterr().out


def test_validate_list_of_non_null(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    schema = str(_write_schema(tmp_path))
    assert _run(monkeypatch, "validate", schema, "String", '["a", "b"]', "--list", "--non-null") == 0
    assert "Valid input for [String]!." in capsys.readouterr().out
    assert _run(monkeypatch, "validate", schema, "String", "null", "--list", "--non-null") == 1


def test_validate_bad_json(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    assert _run(monkeypatch, "validate", str(_write_schema(tmp_path)), "Int", "{not json") == 1
    assert "not valid JSON" in capsys.readouterr().err


def test_validate_unknown_type(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run(monkeypatch, "validate", str(_write_schema(tmp_path)), "Venue", "1") == 1


def test_verbose_logs_parse_failures(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("DEBUG", logger="gqltypes")
    assert _run(monkeypatch, "--verbose", "validate", str(_write_schema(tmp_path)), "Int", "true") == 1
    assert "rejected by type 'Int'" in caplog.text


def test_validate_float_beyond_range(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture
) -> None:
    assert _run(monkeypatch, "validate", str(_write_schema(tmp_path)), "Float", "1" + "0" * 400) == 1
    assert "Invalid input for Float." in capsys.readouterr().out
