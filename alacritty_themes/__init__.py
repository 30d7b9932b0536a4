"""
alacritty_themes - browse alacritty color themes and apply them.

- Theme catalog read from $XDG_CONFIG_HOME/alacritty/themes
- Live palette preview in a curses picker
- Applies a theme by replacing the `colors` block of alacritty.yml,
  keeping a one-time backup of the original file
"""

__version__ = "0.1.0"

from .config import Environment
from .errors import (
    AlacrittyThemesError,
    DocumentParseError,
    EnvironmentConfigError,
    ThemeNotFoundError,
    WriteBackError,
)
from .manager.merge import ApplyResult, ConfigMerger
from .theme.color import parse_color
from .theme.engine import ThemeCatalog, ThemeColors, ThemeEntry, load_theme
from .theme.preview import PreviewLine, render_preview

__all__ = [
    # Environment
    "Environment",
    # Errors
    "AlacrittyThemesError",
    "DocumentParseError",
    "EnvironmentConfigError",
    "ThemeNotFoundError",
    "WriteBackError",
    # Themes
    "parse_color",
    "ThemeCatalog",
    "ThemeColors",
    "ThemeEntry",
    "load_theme",
    "PreviewLine",
    "render_preview",
    # Config merge
    "ApplyResult",
    "ConfigMerger",
]
