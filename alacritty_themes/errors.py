"""
Error types raised by alacritty_themes.

Library code raises these; only the command line layer turns them into
exit codes.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional


class AlacrittyThemesError(Exception):
    """Base class for all errors with a user-facing one-line message."""


class EnvironmentConfigError(AlacrittyThemesError):
    """Environment is not set up: missing variable, config file or themes dir."""


class ThemeNotFoundError(EnvironmentConfigError):
    """A theme requested by name does not exist in the themes directory."""

    def __init__(self, name: str, path: Path):
        self.name = name
        self.path = path
        super().__init__(f"Theme '{name}' not found")


class DocumentParseError(AlacrittyThemesError):
    """A theme or configuration document could not be parsed."""

    def __init__(self, path: Optional[Path], reason: str):
        self.path = path
        self.reason = reason
        where = f"{path}: " if path else ""
        super().__init__(f"{where}{reason}")


class WriteBackError(AlacrittyThemesError):
    """Writing the configuration document back to disk failed."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write to alacritty config file {path}: {cause}")
