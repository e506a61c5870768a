"""Color theme for rmexcept output.

Colors come from the bundled ``data/theme.toml``. A user theme in the
config directory may override any subset of them.
"""

import functools
import logging
import re
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from rmexcept.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Hex colors for each kind of output."""

    model_config = ConfigDict(extra="forbid")

    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    info: str = "#0ec1c8"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    deleted: str = "#f53263"
    kept: str = "#c1ff62"
    skipped: str = "#faf870"

    @field_validator("*", mode="before")
    @classmethod
    def check_hex_color(cls, value: object) -> str:
        color = value.strip() if isinstance(value, str) else value
        if not isinstance(color, str) or not _HEX_COLOR.fullmatch(color):
            msg = f"expected a #RGB or #RRGGBB color, got {value!r}"
            raise ValueError(msg)
        return color

    def styles(self) -> dict[str, str]:
        """Rich styles keyed by the names used in console markup."""
        return {
            "muted": self.muted,
            "border": self.border,
            "bold_header": f"bold {self.header}",
            "info": self.info,
            "success": self.success,
            "warning": self.warning,
            "error": f"bold {self.error}",
            "deleted": self.deleted,
            "kept": self.kept,
            "skipped": self.skipped,
        }


def _read_colors(source: str, text: str) -> dict[str, object]:
    """Return the ``[colors]`` table of a theme file, or an empty dict if unusable."""
    try:
        colors = tomllib.loads(text).get("colors", {})
    except tomllib.TOMLDecodeError as e:
        logger.warning("Ignoring theme %s: %s", source, e)
        return {}
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme %s: 'colors' is not a table", source)
        return {}
    return colors


def load_colors(user_theme: Path | None = None) -> ThemeColors:
    """Load the bundled colors with the user's overrides applied.

    Args:
        user_theme: Theme file to apply. Defaults to the one in the config directory.

    Returns:
        Validated colors. The built-in defaults are used if validation fails.
    """
    bundled = resources.files("rmexcept.data").joinpath("theme.toml")
    colors = _read_colors("bundled theme", bundled.read_text(encoding="utf-8"))

    user_theme = user_theme or get_theme_path()
    if user_theme.is_file():
        try:
            text = user_theme.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Cannot read theme %s: %s", user_theme, e)
        else:
            logger.debug("Applying user theme %s", user_theme)
            colors = {**colors, **_read_colors(str(user_theme), text)}

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


@functools.cache
def get_theme() -> Theme:
    """Rich theme shared by every console, built on first use."""
    return Theme(load_colors().styles())
