"""Pathspec-based file filtering.

Uses the pathspec library for gitignore handling, including negation
patterns, double-star globs and nested .gitignore files.
"""

import logging
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)


# Used when the scanned root has no .gitignore
DEFAULT_IGNORE_PATTERNS: list[str] = [
    "node_modules/",
    ".git/",
    "dist/",
    "build/",
    "out/",
    "coverage/",
    "vendor/",
    "target/",
    ".next/",
    ".venv/",
    "venv/",
    "__pycache__/",
    "*.min.js",
    "*.d.ts.map",
    "*.js.map",
]


def _read_spec(gitignore_path: Path) -> pathspec.PathSpec:
    with open(gitignore_path, encoding="utf-8") as f:
        return pathspec.PathSpec.from_lines("gitwildmatch", f.readlines())


class PathspecFilter:
    """File filter for a scan root with nested .gitignore support."""

    def __init__(self, root: Path, include_nested: bool = True):
        """
        Args:
            root: Directory being scanned
            include_nested: Also honour .gitignore files in subdirectories
        """
        self.root = root
        self._root_spec = self._load_root_spec()
        self._nested_specs: dict[Path, pathspec.PathSpec] = {}
        if include_nested:
            self._load_nested_specs()

    def _load_root_spec(self) -> pathspec.PathSpec:
        gitignore_path = self.root / ".gitignore"
        if gitignore_path.is_file():
            try:
                return _read_spec(gitignore_path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Failed to read {gitignore_path}: {e}")
        return pathspec.PathSpec.from_lines("gitwildmatch", DEFAULT_IGNORE_PATTERNS)

    def _load_nested_specs(self) -> None:
        for gitignore_path in self.root.rglob(".gitignore"):
            if gitignore_path.parent == self.root:
                continue
            try:
                self._nested_specs[gitignore_path.parent] = _read_spec(gitignore_path)
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Skipping unreadable {gitignore_path}: {e}")

    def should_ignore(self, path: Path) -> bool:
        """
        Check whether a path is ignored.

        The root rules apply everywhere; a nested .gitignore applies to its
        own directory and below, deepest first.
        """
        absolute = path if path.is_absolute() else self.root / path
        suffix = "/" if absolute.is_dir() else ""
        try:
            relative = absolute.relative_to(self.root)
        except ValueError:
            return False

        if self._root_spec.match_file(relative.as_posix() + suffix):
            return True

        for gitignore_dir in sorted(self._nested_specs, key=lambda p: len(p.parts), reverse=True):
            try:
                local = absolute.relative_to(gitignore_dir)
            except ValueError:
                continue
            if self._nested_specs[gitignore_dir].match_file(local.as_posix() + suffix):
                return True
        return False

    def filter_paths(self, paths: list[Path]) -> list[Path]:
        """Return the paths that are NOT ignored."""
        return [p for p in paths if not self.should_ignore(p)]
