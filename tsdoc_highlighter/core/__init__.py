"""
Core Layer - the doc-comment parser

Comment locator, comment structurer, data models and the multi-file scanner.
"""

from tsdoc_highlighter.core.models import (
    Category,
    Position,
    Range,
    CommentRegion,
    ClassifiedSpan,
    ParseResult,
)
from tsdoc_highlighter.core.source import (
    SourceText,
    SourceTextError,
    OffsetOutOfRangeError,
    read_source_file,
)
from tsdoc_highlighter.core.patterns import (
    classify_tag,
    tag_kind,
    is_known_tag,
    TAG_TABLES,
)
from tsdoc_highlighter.core.locator import locate_comments
from tsdoc_highlighter.core.structurer import (
    structure_comment,
    extract_description,
)
from tsdoc_highlighter.core.parser import parse_document, parse_text
from tsdoc_highlighter.core.scanner import (
    scan_files,
    FileScan,
    ScanReport,
    DEFAULT_EXTENSIONS,
)

__all__ = [
    # models
    "Category",
    "Position",
    "Range",
    "CommentRegion",
    "ClassifiedSpan",
    "ParseResult",
    # source
    "SourceText",
    "SourceTextError",
    "OffsetOutOfRangeError",
    "read_source_file",
    # patterns
    "classify_tag",
    "tag_kind",
    "is_known_tag",
    "TAG_TABLES",
    # parser
    "locate_comments",
    "structure_comment",
    "extract_description",
    "parse_document",
    "parse_text",
    # scanner
    "scan_files",
    "FileScan",
    "ScanReport",
    "DEFAULT_EXTENSIONS",
]
