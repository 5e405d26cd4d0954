"""
Reporter base - reporter interface
"""

from typing import Protocol

from tsdoc_highlighter.core.models import ParseResult
from tsdoc_highlighter.core.scanner import ScanReport
from tsdoc_highlighter.core.source import SourceText


class Reporter(Protocol):
    """Reporter protocol"""

    def report(self, source: SourceText, result: ParseResult, target: str) -> None:
        """Report on one file"""
        ...

    def report_scan(self, report: ScanReport) -> None:
        """Report on a directory scan"""
        ...
