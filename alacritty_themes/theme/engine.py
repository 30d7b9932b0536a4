"""
Theme system.

Typed view of an alacritty theme file's `colors` block, and the catalog
of theme files found in the themes directory.
"""

from __future__ import annotations
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Optional
import logging
import yaml

from ..errors import DocumentParseError, EnvironmentConfigError

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#000000"
COLORS_KEY = "colors"

ANSI_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


@dataclass(frozen=True)
class PrimaryColors:
    """Default background and foreground."""
    background: str = DEFAULT_COLOR
    foreground: str = DEFAULT_COLOR


@dataclass(frozen=True)
class CursorColors:
    """Cursor colors."""
    text: str = DEFAULT_COLOR
    cursor: str = DEFAULT_COLOR


@dataclass(frozen=True)
class AnsiColors:
    """The eight ANSI colors, used for both the normal and bright rows."""
    black: str = DEFAULT_COLOR
    red: str = DEFAULT_COLOR
    green: str = DEFAULT_COLOR
    yellow: str = DEFAULT_COLOR
    blue: str = DEFAULT_COLOR
    magenta: str = DEFAULT_COLOR
    cyan: str = DEFAULT_COLOR
    white: str = DEFAULT_COLOR

    def items(self) -> list[tuple[str, str]]:
        return [(name, getattr(self, name)) for name in ANSI_NAMES]


@dataclass(frozen=True)
class ThemeColors:
    """
    Palette of a theme file.

    Every color missing from the source falls back to black so the
    palette can always be rendered.
    """
    name: Optional[str] = None
    author: Optional[str] = None
    primary: PrimaryColors = field(default_factory=PrimaryColors)
    cursor: CursorColors = field(default_factory=CursorColors)
    normal: AnsiColors = field(default_factory=AnsiColors)
    bright: AnsiColors = field(default_factory=AnsiColors)

    @classmethod
    def from_dict(cls, data: dict, path: Path = None) -> ThemeColors:
        """
        Build from the mapping found under the `colors` key.

        Args:
            data: The `colors` mapping
            path: Source file, only used in error messages

        Raises:
            DocumentParseError: A section is not a mapping or a value has the wrong type
        """
        if not isinstance(data, dict):
            raise DocumentParseError(path, f"'{COLORS_KEY}' must be a mapping")

        return cls(
            name=_optional_str(data, "name", path),
            author=_optional_str(data, "author", path),
            primary=_section(PrimaryColors, data.get("primary"), "primary", path),
            cursor=_section(CursorColors, data.get("cursor"), "cursor", path),
            normal=_section(AnsiColors, data.get("normal"), "normal", path),
            bright=_section(AnsiColors, data.get("bright"), "bright", path),
        )


def _optional_str(data: dict, key: str, path: Optional[Path]) -> Optional[str]:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise DocumentParseError(path, f"'{COLORS_KEY}.{key}' must be a string")
    return value


def _section(section_cls, data: Any, key: str, path: Optional[Path]):
    """Build one color section, defaulting absent fields."""
    if data is None:
        return section_cls()
    if not isinstance(data, dict):
        raise DocumentParseError(path, f"'{COLORS_KEY}.{key}' must be a mapping")

    values = {}
    for f in fields(section_cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if not isinstance(value, str):
            raise DocumentParseError(
                path, f"'{COLORS_KEY}.{key}.{f.name}' must be a string, got {value!r}"
            )
        values[f.name] = value
    return section_cls(**values)


def parse_document(text: str, path: Path = None) -> Any:
    """Parse YAML text, wrapping parser errors."""
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentParseError(path, f"invalid YAML: {e}") from e


def read_document(path: Path) -> Any:
    """Read and parse a YAML file."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentParseError(path, f"cannot read file: {e}") from e
    except UnicodeDecodeError as e:
        raise DocumentParseError(path, f"not UTF-8 text: {e}") from e
    return parse_document(text, path)


def load_theme(path: Path) -> ThemeColors:
    """
    Load a theme file.

    Args:
        path: Theme YAML file

    Returns:
        Parsed palette

    Raises:
        DocumentParseError: File unreadable, not YAML, or has no `colors` mapping
    """
    document = read_document(path)
    if not isinstance(document, dict) or COLORS_KEY not in document:
        raise DocumentParseError(path, f"no '{COLORS_KEY}' section")
    return ThemeColors.from_dict(document[COLORS_KEY], path)


def load_theme_or_default(path: Path) -> ThemeColors:
    """Load a theme for previewing; any failure gives an all-default palette."""
    try:
        return load_theme(path)
    except DocumentParseError as e:
        logger.debug(f"Using default palette for {path}: {e}")
        return ThemeColors()


@dataclass(frozen=True)
class ThemeEntry:
    """A theme file in the catalog."""
    name: str
    path: Path


class ThemeCatalog:
    """Theme files found directly inside a themes directory."""

    def __init__(self, theme_dir: Path):
        """
        Initialize theme catalog.

        Args:
            theme_dir: Directory to list themes from
        """
        self.theme_dir = Path(theme_dir)
        self._entries: Optional[list[ThemeEntry]] = None

    @classmethod
    def from_environment(cls, env) -> ThemeCatalog:
        """Catalog for the themes directory of an Environment."""
        return cls(env.themes_dir)

    def load_themes(self) -> list[ThemeEntry]:
        """
        Scan the theme directory (non-recursive).

        Entries are sorted by display name; subdirectories are skipped.

        Raises:
            EnvironmentConfigError: Directory missing or unreadable
        """
        if not self.theme_dir.is_dir():
            raise EnvironmentConfigError(f"Themes dir not found: {self.theme_dir}")

        entries = []
        try:
            for path in self.theme_dir.iterdir():
                if not path.is_file():
                    logger.debug(f"Skipping non-file entry: {path}")
                    continue
                entries.append(ThemeEntry(name=path.stem, path=path.absolute()))
        except OSError as e:
            raise EnvironmentConfigError(
                f"Failed to read themes dir {self.theme_dir}: {e}"
            ) from e

        entries.sort(key=lambda entry: (entry.name.lower(), entry.name))
        self._entries = entries
        logger.debug(f"Found {len(entries)} theme(s) in {self.theme_dir}")
        return entries

    @property
    def entries(self) -> list[ThemeEntry]:
        """Catalog entries, scanning the directory on first access."""
        if self._entries is None:
            self.load_themes()
        return self._entries

    def list_themes(self) -> list[str]:
        """
        List available theme names.

        Returns:
            Display names in catalog order
        """
        return [entry.name for entry in self.entries]
