"""
Directory scanner

Walks a directory tree and parses the doc comments of every source file
with a known extension, skipping gitignored paths.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator, Optional

from tsdoc_highlighter.core.models import Category, ParseResult
from tsdoc_highlighter.core.parser import parse_document
from tsdoc_highlighter.core.source import read_source_file
from tsdoc_highlighter.filters.pathspec_filter import PathspecFilter

logger = logging.getLogger(__name__)

# Languages that use /** ... */ doc comments
DEFAULT_EXTENSIONS: frozenset[str] = frozenset({
    ".ts", ".tsx", ".mts", ".cts",
    ".js", ".jsx", ".mjs", ".cjs",
    ".java", ".kt", ".scala", ".swift",
    ".php", ".cs", ".go", ".rs", ".dart",
    ".c", ".h", ".cpp", ".hpp",
})

# Progress callback: relative path of the file being parsed
ProgressCallback = Callable[[str], None]


@dataclass
class FileScan:
    """
    Parse result of one file.

    Attributes:
        path: Path relative to the scan root (POSIX separators)
        result: The file's ParseResult
    """
    path: str
    result: ParseResult


@dataclass
class ScanReport:
    """Results of a directory scan."""
    root: str
    files: list[FileScan] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def region_count(self) -> int:
        return sum(f.result.region_count for f in self.files)

    def totals(self) -> dict[Category, int]:
        """Span count per category over all files."""
        totals = {category: 0 for category in Category}
        for file_scan in self.files:
            for category, count in file_scan.result.counts().items():
                totals[category] += count
        return totals

    def to_dict(self) -> dict:
        return {
            "root": self.root,
            "files": [
                {
                    "file": f.path,
                    "regions": f.result.region_count,
                    "counts": {c.value: n for c, n in f.result.counts().items()},
                }
                for f in self.files
            ],
            "skipped": self.skipped,
            "totals": {c.value: n for c, n in self.totals().items()},
            "regions": self.region_count,
        }


def iter_source_files(
    root: Path,
    extensions: frozenset[str],
    path_filter: PathspecFilter,
) -> Iterator[Path]:
    """Yield matching files under ``root`` in a stable order, pruning ignored directories."""
    try:
        entries = sorted(root.iterdir())
    except OSError as e:
        logger.warning(f"Cannot list {root}: {e}")
        return

    for entry in entries:
        if path_filter.should_ignore(entry):
            continue
        if entry.is_dir():
            yield from iter_source_files(entry, extensions, path_filter)
        elif entry.is_file() and entry.suffix.lower() in extensions:
            yield entry


def scan_files(
    root: Path,
    extensions: Optional[frozenset[str]] = None,
    on_file: Optional[ProgressCallback] = None,
) -> ScanReport:
    """
    Parse every doc comment under a directory.

    Args:
        root: Directory to scan
        extensions: File suffixes to parse (lower case, with dot)
        on_file: Called with each relative path before it is parsed

    Returns:
        ScanReport with one FileScan per parsed file
    """
    if extensions is None:
        extensions = DEFAULT_EXTENSIONS

    report = ScanReport(root=str(root))
    path_filter = PathspecFilter(root)

    for file_path in iter_source_files(root, extensions, path_filter):
        rel_path = file_path.relative_to(root).as_posix()
        try:
            source = read_source_file(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping {rel_path}: {e}")
            report.skipped.append(rel_path)
            continue

        if on_file:
            on_file(rel_path)

        report.files.append(FileScan(path=rel_path, result=parse_document(source)))

    logger.debug(f"Scanned {len(report.files)} files, {report.region_count} doc comments")
    return report
