"""
Category -> rich Style mapping.

Terminals have no alpha channel, so opacity is rendered by blending each
foreground colour toward the flavor's background.
"""

from dataclasses import dataclass

from rich.style import Style

from tsdoc_highlighter.config import HighlightConfig
from tsdoc_highlighter.core.models import Category
from tsdoc_highlighter.render.palettes import Palette, get_palette


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """``#rrggbb`` -> (r, g, b)."""
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb, got {hex_color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def blend(foreground: str, background: str, alpha: float) -> str:
    """Composite ``foreground`` over ``background`` at ``alpha``; returns ``#rrggbb``."""
    fg = hex_to_rgb(foreground)
    bg = hex_to_rgb(background)
    mixed = (round(f * alpha + b * (1 - alpha)) for f, b in zip(fg, bg))
    return "#" + "".join(f"{channel:02x}" for channel in mixed)


# Category -> (palette colour, bold, italic, underline, strike)
# bold/italic are switched by the config toggles; underline/strike are fixed
STYLE_TABLE: dict[Category, tuple[str, bool, bool, bool, bool]] = {
    Category.TAG: ("mauve", True, False, False, False),
    Category.PARAM_NAME: ("peach", True, False, False, False),
    Category.TYPE: ("yellow", False, True, False, False),
    Category.DESCRIPTION: ("subtext1", False, True, False, False),
    Category.LINK: ("sapphire", False, False, True, False),
    Category.COMMENT_DELIMITER: ("overlay1", False, False, False, False),
    Category.DEPRECATED: ("red", True, True, False, True),
    Category.EXAMPLE: ("green", True, False, False, False),
    Category.RETURNS: ("teal", True, False, False, False),
    Category.DEFAULT_VALUE: ("flamingo", False, True, False, False),
    Category.SINCE: ("lavender", False, True, False, False),
    Category.SEE: ("sky", False, True, False, False),
    Category.THROWS: ("maroon", True, False, False, False),
}


@dataclass(frozen=True)
class StyleSet:
    """The complete set of styles for one palette/config pair."""
    palette: Palette
    styles: dict[Category, Style]

    def __getitem__(self, category: Category) -> Style:
        return self.styles[category]

    @classmethod
    def from_config(cls, config: HighlightConfig) -> "StyleSet":
        palette = get_palette(config.flavor)
        styles: dict[Category, Style] = {}
        for category, (colour, bold, italic, underline, strike) in STYLE_TABLE.items():
            styles[category] = Style(
                color=blend(getattr(palette, colour), palette.base, config.opacity),
                bold=bold and config.enable_bold_tags,
                italic=italic and config.enable_italic_descriptions,
                underline=underline,
                strike=strike,
            )
        return cls(palette=palette, styles=styles)
