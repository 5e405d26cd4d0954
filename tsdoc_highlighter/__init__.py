"""
tsdoc-highlighter - classify and highlight /** ... */ documentation comments.
"""

__version__ = "0.1.0"

from tsdoc_highlighter.core import (
    Category,
    ClassifiedSpan,
    CommentRegion,
    ParseResult,
    Position,
    Range,
    SourceText,
    OffsetOutOfRangeError,
    locate_comments,
    parse_document,
    parse_text,
)

__all__ = [
    "__version__",
    "Category",
    "ClassifiedSpan",
    "CommentRegion",
    "ParseResult",
    "Position",
    "Range",
    "SourceText",
    "OffsetOutOfRangeError",
    "locate_comments",
    "parse_document",
    "parse_text",
]
