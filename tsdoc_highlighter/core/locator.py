"""Comment locator: finds ``/** ... */`` regions in raw text."""

from typing import Iterator

from tsdoc_highlighter.core.models import CommentRegion
from tsdoc_highlighter.core.patterns import BLOCK_COMMENT_PATTERN


def locate_comments(text: str) -> Iterator[CommentRegion]:
    """
    Yield every block doc comment in ``text``, left to right.

    The first ``*/`` after an opener closes the region; an opener without
    a closer yields nothing.
    """
    for match in BLOCK_COMMENT_PATTERN.finditer(text):
        yield CommentRegion(text=match.group(0), start_offset=match.start())
