"""
Palette preview generation from themes.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .color import RGB, parse_color, readable_text
from .engine import ThemeColors

EMPTY = "Empty"


@dataclass(frozen=True)
class PreviewLine:
    """One line of the preview: a label, its text and an optional swatch."""
    label: str
    value: str = ""
    swatch: Optional[RGB] = None
    indent: int = 0

    @property
    def is_heading(self) -> bool:
        return not self.value and self.swatch is None

    @property
    def text_color(self) -> Optional[RGB]:
        """Foreground that stays readable on top of the swatch."""
        if self.swatch is None:
            return None
        return readable_text(self.swatch)


def _color_line(label: str, value: str) -> PreviewLine:
    return PreviewLine(label=label, value=value, swatch=parse_color(value), indent=1)


def render_preview(colors: ThemeColors) -> list[PreviewLine]:
    """
    Generate preview lines from a theme palette.

    Never fails, including for an all-default palette.

    Args:
        colors: Palette to preview

    Returns:
        Lines in display order: name, author, primary, cursor, normal, bright
    """
    lines = [
        PreviewLine("name", colors.name or EMPTY),
        PreviewLine("author", colors.author or EMPTY),
        PreviewLine("primary"),
        _color_line("background", colors.primary.background),
        _color_line("foreground", colors.primary.foreground),
        PreviewLine("cursor"),
        _color_line("text", colors.cursor.text),
        _color_line("cursor", colors.cursor.cursor),
        PreviewLine("normal"),
    ]
    lines.extend(_color_line(name, value) for name, value in colors.normal.items())
    lines.append(PreviewLine("bright"))
    lines.extend(_color_line(name, value) for name, value in colors.bright.items())
    return lines


def format_line(line: PreviewLine) -> str:
    """Plain-text form of a preview line, e.g. '  red: #ff5555'."""
    prefix = "  " * line.indent
    if line.is_heading:
        return f"{prefix}{line.label}:"
    return f"{prefix}{line.label}: {line.value}"
