"""
CLI Layer - command line interface
"""

from tsdoc_highlighter.cli.app import app, show, scan, watch, flavors, tags, version

__all__ = [
    "app",
    "show",
    "scan",
    "watch",
    "flavors",
    "tags",
    "version",
]
