"""
Doc-comment parser entry points.

Locates every ``/** ... */`` region of a text snapshot, structures each
one independently and concatenates the results. Parsing is pure: the
same snapshot always yields an equal ``ParseResult``.
"""

import logging
from typing import Union

from tsdoc_highlighter.core.locator import locate_comments
from tsdoc_highlighter.core.models import ParseResult
from tsdoc_highlighter.core.source import SourceText
from tsdoc_highlighter.core.structurer import structure_comment

logger = logging.getLogger(__name__)


def parse_document(source: SourceText) -> ParseResult:
    """
    Parse every doc comment of a snapshot.

    Args:
        source: The text snapshot; offsets are translated against it

    Returns:
        A fresh ParseResult
    """
    result = ParseResult()
    for region in locate_comments(source.text):
        result.extend(structure_comment(region, source))
    logger.debug(f"Parsed {result.region_count} doc comments ({len(source)} chars)")
    return result


def parse_text(text: Union[str, SourceText]) -> ParseResult:
    """Parse a plain string (or an existing snapshot)."""
    source = text if isinstance(text, SourceText) else SourceText(text)
    return parse_document(source)
