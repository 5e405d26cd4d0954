"""Directory scanner and path filter tests."""

from pathlib import Path

import pytest

from tsdoc_highlighter.core import Category, scan_files
from tsdoc_highlighter.filters import PathspecFilter


def _write(root: Path, rel_path: str, content: str) -> Path:
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path):
    _write(tmp_path, "src/a.ts", "/** @param x the x */\nexport function a(x) {}\n")
    _write(tmp_path, "src/b.js", "/** one */\n/** @returns {number} two */\n")
    _write(tmp_path, "src/notes.md", "/** not scanned */\n")
    _write(tmp_path, "node_modules/dep/index.ts", "/** vendored */\n")
    return tmp_path


def test_scan_uses_default_ignores(project):
    report = scan_files(project)

    assert [f.path for f in report.files] == ["src/a.ts", "src/b.js"]
    assert report.region_count == 3
    totals = report.totals()
    assert totals[Category.PARAM_NAME] == 1
    assert totals[Category.RETURNS] == 1
    assert totals[Category.COMMENT_DELIMITER] == 6


def test_scan_respects_gitignore(project):
    _write(project, ".gitignore", "generated/\n")
    _write(project, "generated/out.ts", "/** generated */\n")
    _write(project, "src/.gitignore", "b.js\n")

    report = scan_files(project)

    paths = [f.path for f in report.files]
    assert "generated/out.ts" not in paths
    assert "src/b.js" not in paths
    # A root .gitignore replaces the default patterns
    assert "node_modules/dep/index.ts" in paths


def test_scan_extension_filter_and_progress(project):
    seen = []

    report = scan_files(project, extensions=frozenset({".js"}), on_file=seen.append)

    assert seen == ["src/b.js"]
    assert [f.path for f in report.files] == ["src/b.js"]


def test_unreadable_file_is_skipped(project):
    (project / "src" / "bad.ts").write_bytes(b"/** \xff\xfe */")

    report = scan_files(project)

    assert report.skipped == ["src/bad.ts"]
    assert "src/bad.ts" not in [f.path for f in report.files]


def test_scan_report_to_dict(project):
    data = scan_files(project).to_dict()

    assert data["regions"] == 3
    assert data["files"][0]["file"] == "src/a.ts"
    assert data["files"][0]["counts"]["paramName"] == 1
    assert data["totals"]["returns"] == 1


def test_pathspec_filter_paths(tmp_path):
    _write(tmp_path, ".gitignore", "*.gen.ts\n")
    keep = _write(tmp_path, "a.ts", "")
    drop = _write(tmp_path, "a.gen.ts", "")

    path_filter = PathspecFilter(tmp_path)

    assert path_filter.filter_paths([keep, drop]) == [keep]
    assert path_filter.should_ignore(Path("a.gen.ts"))
