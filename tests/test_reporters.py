"""Reporter tests."""

import io
import json

from rich.console import Console

from tsdoc_highlighter.core import SourceText, parse_document, scan_files
from tsdoc_highlighter.reporters import JsonReporter, RichReporter


def _console(buffer: io.StringIO) -> Console:
    return Console(file=buffer, width=120, color_system=None)


def test_json_report_includes_span_text():
    source = SourceText("/** @param {string} name - the user name */")
    output = io.StringIO()

    JsonReporter(output).report(source, parse_document(source), "user.ts")

    data = json.loads(output.getvalue())
    assert data["file"] == "user.ts"
    assert data["regions"] == 1
    assert data["spans"]["paramName"][0]["text"] == "name"
    assert data["spans"]["type"][0]["start"] == 11
    assert data["summary"]["description"] == 1


def test_json_report_without_text():
    source = SourceText("/** @since 1.0 */")
    output = io.StringIO()

    JsonReporter(output, include_text=False).report(source, parse_document(source), "x.ts")

    data = json.loads(output.getvalue())
    assert "text" not in data["spans"]["since"][0]


def test_rich_report_shows_numbered_comments(sample_text):
    source = SourceText(sample_text)
    buffer = io.StringIO()

    RichReporter(_console(buffer)).report(source, parse_document(source), "add.ts")

    output = buffer.getvalue()
    assert "add.ts" in output
    assert " 3 /**" in output
    assert "@deprecated use {@link Thing} instead" in output
    assert "Params" in output
    # Code outside doc comments is not shown
    assert "return a + b" not in output


def test_rich_report_without_comments():
    source = SourceText("const x = 1;")
    buffer = io.StringIO()

    RichReporter(_console(buffer)).report(source, parse_document(source), "x.ts")

    assert "No doc comments found in x.ts" in buffer.getvalue()


def test_rich_scan_report(tmp_path):
    (tmp_path / "a.ts").write_text("/** @param x */\n", encoding="utf-8")
    buffer = io.StringIO()

    RichReporter(_console(buffer)).report_scan(scan_files(tmp_path))

    output = buffer.getvalue()
    assert "a.ts" in output
    assert "Total" in output


def test_rich_scan_report_empty(tmp_path):
    buffer = io.StringIO()

    RichReporter(_console(buffer)).report_scan(scan_files(tmp_path))

    assert "No source files found" in buffer.getvalue()
