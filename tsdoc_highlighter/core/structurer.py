"""
Comment structurer - classifies the inside of one ``/** ... */`` region.

Sub-scans run in a fixed order:

1. delimiter marks (``/**``, ``*/`` and interior leading ``*``)
2. tag tokens, each with its own window up to the next tag:
   inline ``{type}``, then parameter name / default value / trailing text
3. inline ``{@link ...}`` / ``{@see ...}`` references and other inline
   tags such as ``{@inheritDoc}``
4. free-text description lines

All scanning happens on region-local offsets through ``_Cursor``; offsets
are shifted by the region start only when a span is emitted.
"""

import re
from typing import Iterator, Optional

from tsdoc_highlighter.core.models import (
    Category,
    ClassifiedSpan,
    CommentRegion,
    ParseResult,
)
from tsdoc_highlighter.core.patterns import (
    CLOSE_MARKER,
    DESCRIPTION_SEPARATOR_PATTERN,
    HORIZONTAL_SPACE_PATTERN,
    INLINE_LINK_PATTERN,
    INLINE_TAG_PATTERN,
    LEADING_STAR_PATTERN,
    LINE_MARKER_PATTERN,
    OPEN_MARKER,
    PARAM_NAME_PATTERN,
    TAG_PATTERN,
    TYPE_PATTERN,
    classify_tag,
    tag_kind,
)
from tsdoc_highlighter.core.source import LINE_BREAK_PATTERN, SourceText


class _Cursor:
    """A scanning position inside ``text[pos:end]``."""

    __slots__ = ("text", "pos", "end")

    def __init__(self, text: str, pos: int, end: int):
        self.text = text
        self.pos = pos
        self.end = end

    def match(self, pattern: re.Pattern) -> Optional[re.Match]:
        """Match ``pattern`` at the cursor; advance past it on success."""
        match = pattern.match(self.text, self.pos, self.end)
        if match:
            self.pos = match.end()
        return match

    def line_end(self) -> int:
        """End of the current line, bounded by the window end."""
        match = LINE_BREAK_PATTERN.search(self.text, self.pos, self.end)
        return match.start() if match else self.end


def _line_bounds(text: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) of every physical line, line breaks excluded."""
    start = 0
    for match in LINE_BREAK_PATTERN.finditer(text):
        yield start, match.start()
        start = match.end()
    yield start, len(text)


def _trimmed(text: str, start: int, end: int) -> tuple[int, int]:
    """Shrink ``[start, end)`` to its non-whitespace extent."""
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return start, end


class _RegionScanner:
    """Runs every sub-scan over one region and collects the spans."""

    def __init__(self, region: CommentRegion, source: SourceText):
        self.text = region.text
        self.base = region.start_offset
        self.source = source
        # Offset of the closing "*/"; nothing after it is content
        self.body_end = len(self.text) - len(CLOSE_MARKER)
        self.result = ParseResult(region_count=1)
        self.links = [
            (m.start(), m.end())
            for m in INLINE_LINK_PATTERN.finditer(self.text, 0, self.body_end)
        ]
        inline = list(INLINE_TAG_PATTERN.finditer(self.text, 0, self.body_end))
        # Every {@...} fragment, links included; opaque to block tags and descriptions
        self.fragments = [m.span() for m in inline]
        link_starts = {start for start, _ in self.links}
        self.inline_tags = [m for m in inline if m.start() not in link_starts]

    def emit(self, category: Category, start: int, end: int) -> None:
        start += self.base
        end += self.base
        self.result.add(category, ClassifiedSpan(start, end, self.source.range_of(start, end)))

    def run(self) -> ParseResult:
        self.mark_delimiters()
        self.scan_tags()
        self.scan_links()
        self.scan_description_lines()
        # Sub-scans emit out of order; keep each category in document order
        for spans in self.result.spans.values():
            spans.sort(key=lambda span: (span.start, span.end))
        return self.result

    # ------------------------------------------------------------
    # 1. Delimiters
    # ------------------------------------------------------------

    def mark_delimiters(self) -> None:
        self.emit(Category.COMMENT_DELIMITER, 0, len(OPEN_MARKER))
        self.emit(Category.COMMENT_DELIMITER, self.body_end, len(self.text))

        for line_start, line_end in _line_bounds(self.text):
            match = LEADING_STAR_PATTERN.match(self.text, line_start, line_end)
            if not match:
                continue
            star = match.start(1)
            # The "*" of "/**" or "*/" is already marked
            if star < len(OPEN_MARKER) or star >= self.body_end:
                continue
            self.emit(Category.COMMENT_DELIMITER, star, star + 1)

    # ------------------------------------------------------------
    # 2. Tags
    # ------------------------------------------------------------

    def tag_tokens(self, start: int, end: int) -> Iterator[re.Match]:
        """Block tag tokens in [start, end), skipping any inside an inline fragment."""
        for match in TAG_PATTERN.finditer(self.text, start, end):
            if not any(s <= match.start() < e for s, e in self.fragments):
                yield match

    def scan_tags(self) -> None:
        tags = list(self.tag_tokens(0, self.body_end))
        for index, tag in enumerate(tags):
            window_end = tags[index + 1].start() if index + 1 < len(tags) else self.body_end
            self.scan_tag(tag, window_end)
        for inline in self.inline_tags:
            self.emit(classify_tag(inline.group(1)), inline.start(1), inline.end(1))

    def scan_tag(self, tag: re.Match, window_end: int) -> None:
        token = tag.group(0)
        self.emit(classify_tag(token), tag.start(), tag.end())

        cursor = _Cursor(self.text, tag.end(), window_end)
        type_match = cursor.match(TYPE_PATTERN)
        if type_match:
            self.emit(Category.TYPE, type_match.start(1), type_match.end(1))

        kind = tag_kind(token)
        if kind == "param":
            name = cursor.match(PARAM_NAME_PATTERN)
            if name:
                self.emit(Category.PARAM_NAME, name.start(1), name.end(1))
                cursor.match(DESCRIPTION_SEPARATOR_PATTERN)
                self.describe(cursor.pos, cursor.line_end())
        elif kind == "default":
            cursor.match(HORIZONTAL_SPACE_PATTERN)
            start, end = _trimmed(self.text, cursor.pos, cursor.line_end())
            if start < end:
                self.emit(Category.DEFAULT_VALUE, start, end)
        else:
            self.describe(cursor.pos, cursor.line_end())

    # ------------------------------------------------------------
    # 3. Inline links
    # ------------------------------------------------------------

    def scan_links(self) -> None:
        for start, end in self.links:
            self.emit(Category.LINK, start, end)

    # ------------------------------------------------------------
    # 4. Description lines
    # ------------------------------------------------------------

    def scan_description_lines(self) -> None:
        for line_index, (line_start, line_end) in enumerate(_line_bounds(self.text)):
            if line_index == 0:
                continue
            line_end = min(line_end, self.body_end)
            if line_start >= line_end:
                continue

            content_start = LINE_MARKER_PATTERN.match(self.text, line_start, line_end).end()
            content = self.text[content_start:line_end]
            if not content.strip() or content.startswith(("@", "/")):
                continue

            # A tag later on the line owns the rest of it
            tag = next(self.tag_tokens(content_start, line_end), None)
            if tag:
                line_end = tag.start()
            self.describe(content_start, line_end)

    def describe(self, start: int, end: int) -> None:
        for category, seg_start, seg_end in split_description(self.text, start, end, INLINE_TAG_PATTERN):
            self.emit(category, seg_start, seg_end)


def split_description(
    text: str,
    start: int,
    end: int,
    fragment_pattern: re.Pattern = INLINE_LINK_PATTERN,
) -> Iterator[tuple[Category, int, int]]:
    """
    Split ``text[start:end]`` into description segments around inline fragments.

    Fragments are inline links by default. Only DESCRIPTION segments are
    yielded; the fragments themselves are emitted by the region-wide scans.
    Blank segments are dropped and the rest are trimmed.
    """
    last = start
    for fragment in fragment_pattern.finditer(text, start, end):
        seg_start, seg_end = _trimmed(text, last, fragment.start())
        if seg_start < seg_end:
            yield Category.DESCRIPTION, seg_start, seg_end
        last = fragment.end()
    seg_start, seg_end = _trimmed(text, last, end)
    if seg_start < seg_end:
        yield Category.DESCRIPTION, seg_start, seg_end


def extract_description(text: str, base_offset: int, source: SourceText, result: ParseResult) -> None:
    """
    Append Description spans for a free-text fragment.

    Args:
        text: The fragment
        base_offset: Document offset of ``text[0]``
        source: Snapshot used to translate offsets
        result: Result to append to
    """
    for category, start, end in split_description(text, 0, len(text)):
        start += base_offset
        end += base_offset
        result.add(category, ClassifiedSpan(start, end, source.range_of(start, end)))


def structure_comment(region: CommentRegion, source: SourceText) -> ParseResult:
    """Classify one comment region; returns the region's partial result."""
    return _RegionScanner(region, source).run()
