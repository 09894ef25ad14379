"""Console color theme.

The default palette lives on ThemeColors. A [colors] table in
~/.config/winstrap/theme.toml may override any subset of it.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from winstrap.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

# Styles rendered bold on top of their color
_BOLD_STYLES = frozenset({"error", "absent"})


class ThemeColors(BaseModel):
    """Hex colors (#RGB or #RRGGBB) for each console style."""

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    present: str = "#03b971"
    absent: str = "#f53263"
    skipped: str = "#f5b332"
    created: str = "#c1ff62"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Validate that all color values are valid hex codes."""
        color = v.strip() if isinstance(v, str) else ""
        digits = color[1:]
        if not color.startswith("#") or len(digits) not in (3, 6):
            msg = f"{info.field_name}: expected #RGB or #RRGGBB, got {v!r}"
            raise ValueError(msg)
        try:
            int(digits, 16)
        except ValueError:
            msg = f"{info.field_name}: invalid hex color {color!r}"
            raise ValueError(msg) from None
        return color


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Load the palette, applying user overrides if present.

    An unreadable or invalid user theme is ignored with a warning.

    Args:
        user_path: Override for the user theme location.

    Returns:
        ThemeColors with overrides applied.
    """
    path = user_path or get_user_theme_path()
    try:
        with open(path, "rb") as f:
            overrides = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return ThemeColors()
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return ThemeColors()

    try:
        return ThemeColors.model_validate(overrides)
    except ValidationError as e:
        logger.warning("Ignoring invalid theme %s: %s", path, e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build a Rich Theme with one style per color plus header and dim aliases."""
    colors = colors or load_theme()
    styles = {
        name: f"bold {value}" if name in _BOLD_STYLES else value
        for name, value in colors.model_dump().items()
    }
    styles["bold_header"] = f"bold {colors.header}"
    styles["dim"] = colors.muted
    return Theme(styles)


_cached_theme: Theme | None = None


def get_theme() -> Theme:
    """Get the Rich theme, loading it on first use."""
    global _cached_theme
    if _cached_theme is None:
        _cached_theme = get_rich_theme()
    return _cached_theme
