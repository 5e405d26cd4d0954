"""
Render Layer - the rendering adapter

Maps parser categories to Catppuccin-coloured rich styles.
"""

from tsdoc_highlighter.render.palettes import Palette, PALETTES, FLAVOR_NAMES, get_palette
from tsdoc_highlighter.render.styles import StyleSet, STYLE_TABLE, blend, hex_to_rgb
from tsdoc_highlighter.render.terminal import Snippet, apply_styles, comment_snippets
from tsdoc_highlighter.render.highlighter import Highlighter

__all__ = [
    "Palette",
    "PALETTES",
    "FLAVOR_NAMES",
    "get_palette",
    "StyleSet",
    "STYLE_TABLE",
    "blend",
    "hex_to_rgb",
    "Snippet",
    "apply_styles",
    "comment_snippets",
    "Highlighter",
]
