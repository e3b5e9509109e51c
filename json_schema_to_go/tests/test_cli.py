#!/usr/bin/env python3

import json
import logging

import pytest
from click.testing import CliRunner

from json_schema_to_go.cli_utils import reconstruct_command_line
from json_schema_to_go.json_schema_to_go import json_schema_to_go

WIDGET = {
    "definitions": {
        "Widget": {
            "type": "object",
            "properties": {"id": {"type": "string"}, "count": {"type": "integer"}},
        }
    }
}
HOLDER = {"type": "object", "properties": {"w": {"$ref": "a#/definitions/Widget"}}}


@pytest.fixture
def schema_dir(tmp_path):
    schemas = tmp_path / "schemas"
    schemas.mkdir()
    (schemas / "a.json").write_text(json.dumps(WIDGET))
    (schemas / "b.json").write_text(json.dumps(HOLDER))
    return schemas


@pytest.fixture
def runner():
    return CliRunner()


def test_no_arguments_prints_usage(runner):
    result = runner.invoke(json_schema_to_go, [])
    assert result.exit_code == 1
    assert "Usage:" in result.output


def test_stdout_mode(runner, schema_dir):
    result = runner.invoke(
        json_schema_to_go,
        ["--stdout", "--no-fmt", "--no-comments", str(schema_dir / "*.json")],
    )
    assert result.exit_code == 0, result.output
    assert "type Widget struct {" in result.output
    assert "    W *Widget `json:\"w,omitempty\" yaml:\"w,omitempty\"`" in result.output
    assert result.output.index("type Widget") < result.output.index("type B struct")


def test_file_mode(runner, schema_dir, tmp_path):
    out = tmp_path / "generated"
    result = runner.invoke(
        json_schema_to_go,
        ["--dir", str(out), "--pkg", "shapes", "--no-fmt", str(schema_dir / "*.json")],
    )
    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in out.iterdir()) == ["B.go", "Widget.go"]

    widget = (out / "Widget.go").read_text()
    assert widget.startswith("package shapes\n")
    assert "// Widget defined from schema:" in widget
    assert "// json_schema_to_go --dir" in widget
    assert "--pkg shapes --no-fmt" in widget


def test_config_file_with_cli_override(runner, schema_dir, tmp_path):
    out = tmp_path / "generated"
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"output_dir": str(out), "package_name": "fromconfig", "comments": False, "formatter": {"enabled": False}}))

    result = runner.invoke(json_schema_to_go, ["--config", str(config), "--pkg", "fromcli", str(schema_dir / "*.json")])
    assert result.exit_code == 0, result.output

    widget = (out / "Widget.go").read_text()
    assert widget.startswith("package fromcli\n")
    assert "defined from schema" not in widget


def test_decode_error_exits_with_1(runner, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text('{"type": "date"}')
    result = runner.invoke(json_schema_to_go, ["--stdout", "--no-fmt", str(bad)])
    assert result.exit_code == 1
    assert 'Error: bad: unknown schema type "date"' in result.output


def test_missing_reference_file_exits_with_1(runner, schema_dir):
    result = runner.invoke(json_schema_to_go, ["--stdout", "--no-fmt", str(schema_dir / "b.json")])
    assert result.exit_code == 1
    assert "Error: invalid reference file" in result.output


def test_no_matching_files(runner, tmp_path):
    result = runner.invoke(json_schema_to_go, [str(tmp_path / "*.json")])
    assert result.exit_code == 1
    assert "no schema files match" in result.output


class TestCliUtils:
    def test_reconstruct_command_line_without_context(self):
        """Command reconstruction without an active Click context falls back to the name"""
        assert reconstruct_command_line(json_schema_to_go) == "json_schema_to_go"


def test_effective_config_is_logged(runner, schema_dir, tmp_path, caplog):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"validate_before_write": False, "formatter": {"enabled": False}}))

    caplog.set_level(logging.DEBUG, logger="json_schema_to_go.json_schema_to_go")
    result = runner.invoke(json_schema_to_go, ["--config", str(config), "--stdout", str(schema_dir / "*.json")])
    assert result.exit_code == 0, result.output

    logged = [r.getMessage() for r in caplog.records if r.getMessage().startswith("Configuration: ")]
    assert len(logged) == 1
    effective = json.loads(logged[0].removeprefix("Configuration: "))
    assert effective["validate_before_write"] is False
    assert effective["stdout"] is True
    assert effective["formatter"]["enabled"] is False
