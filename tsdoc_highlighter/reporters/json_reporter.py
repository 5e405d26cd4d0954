"""
JSON reporter - machine-readable span output
"""

import json
import sys
from typing import TextIO

from tsdoc_highlighter.core.models import ParseResult
from tsdoc_highlighter.core.scanner import ScanReport
from tsdoc_highlighter.core.source import SourceText


class JsonReporter:
    """JSON reporter"""

    def __init__(self, output: TextIO | None = None, include_text: bool = True):
        self.output = output or sys.stdout
        self.include_text = include_text

    def report(self, source: SourceText, result: ParseResult, target: str) -> None:
        """Write every span of one file, grouped by category."""
        spans = {}
        for category, category_spans in result.spans.items():
            entries = []
            for span in category_spans:
                entry = span.to_dict()
                if self.include_text:
                    entry["text"] = span.text_in(source.text)
                entries.append(entry)
            spans[category.value] = entries

        report_data = {
            "file": target,
            "regions": result.region_count,
            "spans": spans,
            "summary": {c.value: n for c, n in result.counts().items()},
        }
        self._write(report_data)

    def report_scan(self, report: ScanReport) -> None:
        """Write per-file counts and totals of a scan."""
        self._write(report.to_dict())

    def _write(self, data: dict) -> None:
        print(json.dumps(data, indent=2, ensure_ascii=False), file=self.output)
