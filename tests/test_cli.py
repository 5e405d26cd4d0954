"""CLI tests."""

import json

import pytest
from typer.testing import CliRunner

from tsdoc_highlighter import __version__
from tsdoc_highlighter.cli.app import app


@pytest.fixture
def runner():
    return CliRunner()


def test_show_json(runner, sample_file):
    result = runner.invoke(app, ["show", str(sample_file), "--format", "json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["regions"] == 2
    assert [s["text"] for s in data["spans"]["paramName"]] == ["a", "b"]


def test_show_rich(runner, sample_file):
    result = runner.invoke(app, ["show", str(sample_file), "--flavor", "latte", "--no-bold"])

    assert result.exit_code == 0
    assert "Adds two numbers." in result.output
    assert "latte" in result.output


def test_show_reads_config_file(runner, sample_file):
    (sample_file.parent / ".tsdoc-highlighter.toml").write_text('flavor = "frappe"\n')

    result = runner.invoke(app, ["show", str(sample_file)])

    assert result.exit_code == 0
    assert "frappe" in result.output


def test_show_missing_file(runner, tmp_path):
    result = runner.invoke(app, ["show", str(tmp_path / "missing.ts")])

    assert result.exit_code == 1
    assert "does not exist" in result.output


def test_show_invalid_flavor(runner, sample_file):
    result = runner.invoke(app, ["show", str(sample_file), "--flavor", "espresso"])

    assert result.exit_code == 1
    assert "Unknown flavor" in result.output


def test_show_invalid_opacity(runner, sample_file):
    result = runner.invoke(app, ["show", str(sample_file), "--opacity", "2"])

    assert result.exit_code == 1
    assert "opacity" in result.output


def test_show_json_offsets_index_crlf_file(runner, tmp_path):
    raw = "/**\r\n * @param {string} name - hi\r\n */\r\n"
    path = tmp_path / "crlf.ts"
    path.write_bytes(raw.encode("utf-8"))

    result = runner.invoke(app, ["show", str(path), "--format", "json"])

    assert result.exit_code == 0
    [span] = json.loads(result.output)["spans"]["paramName"]
    assert raw[span["start"]:span["end"]] == "name"
    assert span["range"]["start"] == {"line": 1, "character": 19}


def test_scan_json(runner, tmp_path):
    (tmp_path / "a.ts").write_text("/** @returns {T} it */\n", encoding="utf-8")
    (tmp_path / "b.tsx").write_text("/** plain */\n", encoding="utf-8")

    result = runner.invoke(app, ["scan", str(tmp_path), "--ext", "ts", "--format", "json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [f["file"] for f in data["files"]] == ["a.ts"]
    assert data["totals"]["returns"] == 1


def test_scan_rejects_file(runner, sample_file):
    result = runner.invoke(app, ["scan", str(sample_file)])

    assert result.exit_code == 1
    assert "not a directory" in result.output


def test_flavors(runner):
    result = runner.invoke(app, ["flavors"])

    assert result.exit_code == 0
    for name in ("mocha", "macchiato", "frappe", "latte"):
        assert name in result.output


def test_tags(runner):
    result = runner.invoke(app, ["tags"])

    assert result.exit_code == 0
    assert "deprecated" in result.output
    assert "@defaultValue" in result.output


def test_version(runner):
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
