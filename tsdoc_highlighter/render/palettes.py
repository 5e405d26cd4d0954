"""
Catppuccin palettes.

Only the colours the highlighter uses are listed, plus ``base`` (the
background opacity is blended against) and ``text``.
"""

from dataclasses import dataclass

from tsdoc_highlighter.config import ConfigError


@dataclass(frozen=True)
class Palette:
    """A Catppuccin flavor; every colour is a ``#rrggbb`` string."""
    name: str
    label: str
    is_dark: bool
    flamingo: str
    mauve: str
    red: str
    maroon: str
    peach: str
    yellow: str
    green: str
    teal: str
    sky: str
    sapphire: str
    lavender: str
    text: str
    subtext1: str
    overlay1: str
    base: str


MOCHA = Palette(
    name="mocha",
    label="Mocha - the original, darkest variant",
    is_dark=True,
    flamingo="#f2cdcd",
    mauve="#cba6f7",
    red="#f38ba8",
    maroon="#eba0ac",
    peach="#fab387",
    yellow="#f9e2af",
    green="#a6e3a1",
    teal="#94e2d5",
    sky="#89dceb",
    sapphire="#74c7ec",
    lavender="#b4befe",
    text="#cdd6f4",
    subtext1="#bac2de",
    overlay1="#7f849c",
    base="#1e1e2e",
)

MACCHIATO = Palette(
    name="macchiato",
    label="Macchiato - medium contrast dark theme",
    is_dark=True,
    flamingo="#f0c6c6",
    mauve="#c6a0f6",
    red="#ed8796",
    maroon="#ee99a0",
    peach="#f5a97f",
    yellow="#eed49f",
    green="#a6da95",
    teal="#8bd5ca",
    sky="#91d7e3",
    sapphire="#7dc4e4",
    lavender="#b7bdf8",
    text="#cad3f5",
    subtext1="#b8c0e0",
    overlay1="#8087a2",
    base="#24273a",
)

FRAPPE = Palette(
    name="frappe",
    label="Frappe - muted dark theme",
    is_dark=True,
    flamingo="#eebebe",
    mauve="#ca9ee6",
    red="#e78284",
    maroon="#ea999c",
    peach="#ef9f76",
    yellow="#e5c890",
    green="#a6d189",
    teal="#81c8be",
    sky="#99d1db",
    sapphire="#85c1dc",
    lavender="#babbf1",
    text="#c6d0f5",
    subtext1="#b5bfe2",
    overlay1="#838ba7",
    base="#303446",
)

LATTE = Palette(
    name="latte",
    label="Latte - light theme",
    is_dark=False,
    flamingo="#dd7878",
    mauve="#8839ef",
    red="#d20f39",
    maroon="#e64553",
    peach="#fe640b",
    yellow="#df8e1d",
    green="#40a02b",
    teal="#179299",
    sky="#04a5e5",
    sapphire="#209fb5",
    lavender="#7287fd",
    text="#4c4f69",
    subtext1="#5c5f77",
    overlay1="#8c8fa1",
    base="#eff1f5",
)

PALETTES: dict[str, Palette] = {
    palette.name: palette for palette in (MOCHA, MACCHIATO, FRAPPE, LATTE)
}

FLAVOR_NAMES: tuple[str, ...] = tuple(PALETTES)


def get_palette(name: str) -> Palette:
    """Look up a flavor by name (case-insensitive)."""
    try:
        return PALETTES[name.lower()]
    except KeyError:
        raise ConfigError(
            f"Unknown flavor '{name}' (expected one of: {', '.join(FLAVOR_NAMES)})"
        ) from None
