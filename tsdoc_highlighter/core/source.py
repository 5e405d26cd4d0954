"""
Source text snapshot with offset <-> position translation.

Line breaks are ``\\r\\n``, ``\\r`` or ``\\n``; a ``\\r\\n`` pair is a single
break, matching how editors count lines.
"""

import re
from bisect import bisect_right

from tsdoc_highlighter.core.models import Position, Range


LINE_BREAK_PATTERN = re.compile(r'\r\n|\r|\n')


class SourceTextError(Exception):
    """Base class for source text errors."""


class OffsetOutOfRangeError(SourceTextError, ValueError):
    """Offset or position outside the text (usually a stale snapshot)."""


class SourceText:
    """An immutable text snapshot."""

    __slots__ = ("_text", "_line_starts")

    def __init__(self, text: str):
        self._text = text
        starts = [0]
        for match in LINE_BREAK_PATTERN.finditer(text):
            starts.append(match.end())
        self._line_starts = tuple(starts)

    @property
    def text(self) -> str:
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"SourceText(length={len(self._text)}, lines={self.line_count})"

    def line_start(self, line: int) -> int:
        """Offset of the first character of ``line``."""
        if not 0 <= line < len(self._line_starts):
            raise OffsetOutOfRangeError(f"Line {line} outside 0..{len(self._line_starts) - 1}")
        return self._line_starts[line]

    def position_at(self, offset: int) -> Position:
        """Translate an offset into a position."""
        if not 0 <= offset <= len(self._text):
            raise OffsetOutOfRangeError(
                f"Offset {offset} outside 0..{len(self._text)}"
            )
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line, offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        """Translate a position back into an offset."""
        start = self.line_start(position.line)
        if position.line + 1 < len(self._line_starts):
            # End of the line content, before its break
            limit = self._line_starts[position.line + 1]
            limit -= 2 if self._text[limit - 2:limit] == "\r\n" else 1
        else:
            limit = len(self._text)
        offset = start + position.character
        if position.character < 0 or offset > limit:
            raise OffsetOutOfRangeError(f"Position {position} outside line bounds")
        return offset

    def range_of(self, start: int, end: int) -> Range:
        """Translate an offset pair into a range."""
        if start > end:
            raise OffsetOutOfRangeError(f"Span start {start} after end {end}")
        return Range(self.position_at(start), self.position_at(end))


def read_source_file(path) -> SourceText:
    """
    Read a UTF-8 file into a snapshot with its line breaks untranslated.

    Offsets then index the characters actually on disk, ``\\r\\n`` included.
    """
    with open(path, encoding="utf-8", newline="") as f:
        return SourceText(f.read())
