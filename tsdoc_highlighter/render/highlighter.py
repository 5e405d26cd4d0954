"""
Highlighter - the rendering adapter's state.

Owns the active configuration and its StyleSet. ``reload`` swaps both at
once, so a render never mixes styles from two configurations.
"""

import logging
from typing import Optional

from rich.text import Text

from tsdoc_highlighter.config import HighlightConfig
from tsdoc_highlighter.core.models import ParseResult
from tsdoc_highlighter.core.parser import parse_document
from tsdoc_highlighter.core.source import SourceText
from tsdoc_highlighter.render.styles import StyleSet
from tsdoc_highlighter.render.terminal import Snippet, apply_styles, comment_snippets

logger = logging.getLogger(__name__)


class Highlighter:
    """Parses snapshots and styles them with the current StyleSet."""

    def __init__(self, config: Optional[HighlightConfig] = None):
        self._config = config or HighlightConfig()
        self._styles = StyleSet.from_config(self._config)

    @property
    def config(self) -> HighlightConfig:
        return self._config

    @property
    def styles(self) -> StyleSet:
        return self._styles

    def reload(self, config: HighlightConfig) -> None:
        """Replace the configuration and rebuild every style."""
        styles = StyleSet.from_config(config)
        self._config, self._styles = config, styles
        logger.debug(f"Styles rebuilt for flavor '{config.flavor}'")

    def highlight(self, source: SourceText, result: Optional[ParseResult] = None) -> Text:
        """Whole document as styled Text; parses unless ``result`` is given."""
        if result is None:
            result = parse_document(source)
        return apply_styles(source, result, self._styles)

    def snippets(self, source: SourceText, result: Optional[ParseResult] = None) -> list[Snippet]:
        """Styled line windows around each doc comment."""
        return list(comment_snippets(source, self.highlight(source, result)))
