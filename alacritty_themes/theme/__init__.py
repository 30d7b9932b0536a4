"""
Theme palettes, catalog and preview.
"""

from .color import parse_color
from .engine import ThemeCatalog, ThemeColors, ThemeEntry, load_theme, load_theme_or_default
from .preview import PreviewLine, render_preview

__all__ = [
    "parse_color",
    "ThemeCatalog",
    "ThemeColors",
    "ThemeEntry",
    "load_theme",
    "load_theme_or_default",
    "PreviewLine",
    "render_preview",
]
