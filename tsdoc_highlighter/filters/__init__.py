"""
Filters Layer - file filtering

Gitignore-aware filtering for directory scans.
"""

from tsdoc_highlighter.filters.pathspec_filter import PathspecFilter, DEFAULT_IGNORE_PATTERNS

__all__ = [
    "PathspecFilter",
    "DEFAULT_IGNORE_PATTERNS",
]
