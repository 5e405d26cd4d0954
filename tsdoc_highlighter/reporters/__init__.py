"""
Reporters Layer - output

Rich terminal reporter and JSON reporter.
"""

from tsdoc_highlighter.reporters.base import Reporter
from tsdoc_highlighter.reporters.rich_reporter import RichReporter
from tsdoc_highlighter.reporters.json_reporter import JsonReporter

__all__ = [
    "Reporter",
    "RichReporter",
    "JsonReporter",
]
