"""Color theme for agentkeys output and the interactive picker.

Colors come from built-in defaults, optionally overridden by the
``[colors]`` table of ``~/.config/agentkeys/theme.toml``::

    [colors]
    cursor = "#ffaa00"
    disabled = "#555555"
"""

import logging
import tomllib
from functools import cache
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, ValidationError
from rich.theme import Theme

from agentkeys.core.paths import get_theme_path

logger = logging.getLogger(__name__)


def _check_hex(value: object) -> str:
    """Accept #RGB or #RRGGBB strings."""
    if not isinstance(value, str):
        msg = "color must be a string"
        raise ValueError(msg)
    color = value.strip()
    if not color.startswith("#"):
        msg = f"color {color!r} must start with '#'"
        raise ValueError(msg)
    digits = color[1:]
    if len(digits) not in (3, 6):
        msg = f"color {color!r} must be #RGB or #RRGGBB"
        raise ValueError(msg)
    if any(c not in "0123456789abcdefABCDEF" for c in digits):
        msg = f"invalid hex color {color!r}"
        raise ValueError(msg)
    return color


HexColor = Annotated[str, BeforeValidator(_check_hex)]


class ThemeColors(BaseModel):
    """Named colors used by the consoles and the picker."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    # Picker rows
    cursor: HexColor = "#FF75B7"
    enabled: HexColor = "#03b971"
    disabled: HexColor = "#636e72"


# Rich style name -> (color field, extra attributes)
_STYLES: dict[str, tuple[str, str]] = {
    "text": ("text", ""),
    "muted": ("muted", ""),
    "dim": ("muted", ""),
    "header": ("header", ""),
    "bold_header": ("header", "bold"),
    "border": ("border", ""),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "cursor": ("cursor", "bold"),
    "enabled": ("enabled", ""),
    "disabled": ("disabled", ""),
}


def _read_color_overrides(path: Path) -> dict[str, str] | None:
    """Read the string entries of the ``[colors]`` table.

    Returns:
        Mapping of color name to value, or None if the file is missing
        or unusable.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Failed to parse theme file %s: %s", path, e)
        return None
    except OSError as e:
        logger.warning("Failed to read theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring 'colors' in %s: expected a table", path)
        return None
    return {name: value for name, value in colors.items() if isinstance(value, str)}


def load_theme(path: Path | None = None) -> ThemeColors:
    """Load theme colors, applying user overrides when they validate.

    Args:
        path: Theme file to read. Defaults to the agentkeys theme path.
    """
    theme_path = path or get_theme_path()
    overrides = _read_color_overrides(theme_path)
    if not overrides:
        return ThemeColors()

    try:
        colors = ThemeColors(**overrides)
    except ValidationError as e:
        logger.warning("Invalid colors in %s, using defaults: %s", theme_path, e)
        return ThemeColors()

    logger.debug("Applied %d color override(s) from %s", len(overrides), theme_path)
    return colors


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme for the given colors (user theme if None)."""
    colors = colors or load_theme()
    styles = {
        name: f"{attributes} {getattr(colors, field)}".strip()
        for name, (field, attributes) in _STYLES.items()
    }
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Return the Rich theme, loaded once per process."""
    return get_rich_theme()


def reload_theme() -> Theme:
    """Drop the cached theme and load it again."""
    get_theme.cache_clear()
    return get_theme()
