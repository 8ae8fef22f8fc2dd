"""Tests for the secint-sanity command line interface."""

import json

import pytest
from click.testing import CliRunner
from secint_sanity import __version__
from secint_sanity.cli import main


@pytest.fixture
def runner():
    return CliRunner()


def _write(tmp_path, data, name="options.json"):
    path = tmp_path / name
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return str(path)


def test_valid_file(runner, tmp_path):
    path = _write(tmp_path, {"kind": "alter-scim", "name": "MY_SCIM", "set": {"comment": "a"}})
    result = runner.invoke(main, [path])
    assert result.exit_code == 0
    assert "Valid alter-scim options" in result.output


def test_invalid_file_lists_every_error(runner, tmp_path):
    path = _write(tmp_path, {"kind": "alter-scim", "name": "", "set": {}, "unset_tags": []})
    result = runner.invoke(main, [path])
    assert result.exit_code == 1
    assert "Found 3 error(s)" in result.output
    assert "invalid object identifier" in result.output
    assert "exactly one of" in result.output
    assert "at least one of" in result.output


def test_kind_option(runner, tmp_path):
    path = _write(tmp_path, {"name": "MY_INT"})
    result = runner.invoke(main, ["--kind", "drop", path])
    assert result.exit_code == 0


def test_kind_from_environment(runner, tmp_path):
    path = _write(tmp_path, {"name": "MY_INT"})
    result = runner.invoke(main, [path], env={"SECINT_SANITY_KIND": "describe"})
    assert result.exit_code == 0
    assert "describe" in result.output


def test_stdin(runner):
    result = runner.invoke(main, ["--stdin"], input='{"kind": "show"}')
    assert result.exit_code == 0


def test_json_output(runner, tmp_path):
    path = _write(tmp_path, {"kind": "create-oauth-partner", "name": "L", "oauth_client": "LOOKER"})
    result = runner.invoke(main, ["--json", path])
    assert result.exit_code == 1
    report = json.loads(result.output)
    assert report["valid"] is False
    assert report["kind"] == "create-oauth-partner"
    assert report["violations"][0]["rule"] == "conditional_requirement"
    assert report["violations"][0]["fields"] == ["oauth_client", "oauth_redirect_uri"]


def test_invalid_json(runner, tmp_path):
    path = _write(tmp_path, "{not json")
    result = runner.invoke(main, [path])
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_non_utf8_file(runner, tmp_path):
    path = tmp_path / "bad.json"
    path.write_bytes(b'{"kind": "drop", "name": "\xff\xfe"}')
    result = runner.invoke(main, [str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "UTF-8" in result.output


def test_non_utf8_stdin(runner):
    result = runner.invoke(main, ["--stdin"], input=b'{"kind": "show", "like": "\xff"}')
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "UTF-8" in result.output


def test_load_error_as_json(runner, tmp_path):
    path = _write(tmp_path, {"kind": "drop", "name": "X", "cascade": True})
    result = runner.invoke(main, ["--json", path])
    assert result.exit_code == 1
    assert "cascade" in json.loads(result.output)["error"]


def test_no_input_prints_help(runner):
    result = runner.invoke(main, [])
    assert result.exit_code == 1
    assert "Usage" in result.output


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output
