"""Applies a ParseResult to rich Text."""

from dataclasses import dataclass
from typing import Iterator

from rich.text import Text

from tsdoc_highlighter.core.locator import locate_comments
from tsdoc_highlighter.core.models import Category, ParseResult
from tsdoc_highlighter.core.source import SourceText
from tsdoc_highlighter.render.styles import StyleSet


# Later entries are applied last and win where spans overlap
APPLY_ORDER: list[Category] = [
    Category.COMMENT_DELIMITER,
    Category.DESCRIPTION,
    Category.LINK,
    Category.TYPE,
    Category.PARAM_NAME,
    Category.DEFAULT_VALUE,
    Category.TAG,
    Category.DEPRECATED,
    Category.EXAMPLE,
    Category.RETURNS,
    Category.SINCE,
    Category.SEE,
    Category.THROWS,
]


@dataclass(frozen=True)
class Snippet:
    """A run of whole lines (0-based, inclusive) containing doc comments."""
    first_line: int
    last_line: int
    text: Text


def apply_styles(source: SourceText, result: ParseResult, styles: StyleSet) -> Text:
    """Return the whole document as Text with every span stylized."""
    text = Text(source.text)
    for category in APPLY_ORDER:
        style = styles[category]
        for span in result[category]:
            text.stylize(style, span.start, span.end)
    return text


def comment_snippets(source: SourceText, styled: Text) -> Iterator[Snippet]:
    """
    Cut ``styled`` into the line windows covering each doc comment.

    Comments that share a line are merged into one snippet.
    """
    windows: list[list[int]] = []
    for region in locate_comments(source.text):
        first = source.position_at(region.start_offset).line
        last = source.position_at(region.end_offset).line
        if windows and first <= windows[-1][1]:
            windows[-1][1] = max(windows[-1][1], last)
        else:
            windows.append([first, last])

    for first, last in windows:
        start = source.line_start(first)
        if last + 1 < source.line_count:
            end = source.line_start(last + 1)
        else:
            end = len(source)
        snippet = styled[start:end]
        snippet.rstrip()
        yield Snippet(first, last, snippet)
