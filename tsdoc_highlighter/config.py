"""
Configuration for the rendering side.

Settings come from, lowest precedence first:

1. ``HighlightConfig`` defaults
2. ``[tool.tsdoc-highlighter]`` in ``pyproject.toml``, or the top level of
   ``.tsdoc-highlighter.toml``
3. command line options

The parser itself takes no configuration.
"""

import logging
import sys
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

# Handle tomllib/tomli for different Python versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

logger = logging.getLogger(__name__)


CONFIG_FILE_NAME = ".tsdoc-highlighter.toml"
PYPROJECT_TABLE = "tsdoc-highlighter"

# camelCase keys of the original editor settings
CAMEL_CASE_KEYS: dict[str, str] = {
    "enableItalicDescriptions": "enable_italic_descriptions",
    "enableBoldTags": "enable_bold_tags",
}


class ConfigError(Exception):
    """Invalid configuration value or unreadable configuration file."""


@dataclass(frozen=True)
class HighlightConfig:
    """
    Rendering options.

    Attributes:
        flavor: Palette name (mocha, macchiato, frappe, latte)
        enable_italic_descriptions: Italic type/description/since/see styles
        enable_bold_tags: Bold tag-like styles
        opacity: Foreground opacity in [0, 1]
    """
    flavor: str = "mocha"
    enable_italic_descriptions: bool = True
    enable_bold_tags: bool = True
    opacity: float = 1.0

    def __post_init__(self) -> None:
        # Imported here: render.palettes imports ConfigError from this module
        from tsdoc_highlighter.render.palettes import FLAVOR_NAMES

        if not isinstance(self.flavor, str) or self.flavor.lower() not in FLAVOR_NAMES:
            raise ConfigError(
                f"Unknown flavor '{self.flavor}' (expected one of: {', '.join(FLAVOR_NAMES)})"
            )
        object.__setattr__(self, "flavor", self.flavor.lower())
        for name in ("enable_italic_descriptions", "enable_bold_tags"):
            if not isinstance(getattr(self, name), bool):
                raise ConfigError(f"'{name}' must be true or false")
        if isinstance(self.opacity, bool) or not isinstance(self.opacity, (int, float)):
            raise ConfigError("'opacity' must be a number")
        if not 0.0 <= self.opacity <= 1.0:
            raise ConfigError(f"'opacity' must be between 0 and 1, got {self.opacity}")

    def merged(self, **overrides: Any) -> "HighlightConfig":
        """Copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "HighlightConfig":
        """Build from a TOML table; unknown keys are logged and ignored."""
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = CAMEL_CASE_KEYS.get(key, key.replace("-", "_"))
            if name in known:
                values[name] = value
            else:
                logger.warning(f"Ignoring unknown configuration key '{key}'")
        return cls(**values)


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e


def find_config_file(start: Path) -> Optional[Path]:
    """
    Find the nearest configuration file at or above ``start``.

    A ``.tsdoc-highlighter.toml`` wins over a ``pyproject.toml`` in the same
    directory; a ``pyproject.toml`` only counts if it has our table. An
    unreadable ``pyproject.toml`` is logged and passed over.
    """
    directory = start if start.is_dir() else start.parent
    for candidate in [directory, *directory.parents]:
        dedicated = candidate / CONFIG_FILE_NAME
        if dedicated.is_file():
            return dedicated
        pyproject = candidate / "pyproject.toml"
        if not pyproject.is_file():
            continue
        try:
            data = _read_toml(pyproject)
        except ConfigError as e:
            logger.warning(f"Ignoring unreadable {pyproject.name}: {e}")
            continue
        if PYPROJECT_TABLE in data.get("tool", {}):
            return pyproject
    return None


def load_config(path: Optional[Path] = None, start: Optional[Path] = None) -> HighlightConfig:
    """
    Load configuration.

    Args:
        path: Explicit configuration file; searched for when omitted
        start: Where to start searching (defaults to the working directory)

    Returns:
        HighlightConfig (defaults when no file is found)

    Raises:
        ConfigError: The file is unreadable or holds invalid values
    """
    if path is None:
        path = find_config_file((start or Path.cwd()).resolve())
        if path is None:
            return HighlightConfig()

    data = _read_toml(path)
    if path.name == "pyproject.toml":
        data = data.get("tool", {}).get(PYPROJECT_TABLE, {})

    logger.debug(f"Loaded configuration from {path}")
    return HighlightConfig.from_mapping(data)
