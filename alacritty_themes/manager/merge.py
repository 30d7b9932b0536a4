"""
Apply a theme to the alacritty configuration file.

The whole `colors` block of the configuration is replaced with the theme's
`colors` block; every other key is written back unchanged.
"""

from __future__ import annotations
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..config import THEME_SUFFIX, Environment
from ..errors import (
    DocumentParseError,
    EnvironmentConfigError,
    ThemeNotFoundError,
    WriteBackError,
)
from ..theme.engine import COLORS_KEY, read_document

logger = logging.getLogger(__name__)

BACKUP_MARKER = "-backup"
NAME_NOT_FOUND = "ERROR: name not found"


@dataclass(frozen=True)
class ApplyResult:
    """Outcome of applying a theme."""
    config_path: Path
    theme_path: Path
    backup_path: Optional[Path] = None

    # No backup existed and making one failed
    backup_failed: bool = False


def backup_path(path: Path) -> Path:
    """'alacritty.yml' -> 'alacritty-backup.yml', in the same directory."""
    path = Path(path)
    return path.with_name(f"{path.stem}{BACKUP_MARKER}{path.suffix}")


def backup(path: Path) -> Optional[Path]:
    """
    Copy the config file to its backup sibling, once.

    Best effort: failures are logged, never raised.

    Args:
        path: Configuration file

    Returns:
        Backup path if a copy was made, None otherwise
    """
    target = backup_path(path)
    if target.exists():
        logger.debug(f"Backup already exists: {target}")
        return None

    try:
        shutil.copy2(path, target)
    except OSError as e:
        logger.warning(f"Failed to backup alacritty config file: {e}")
        return None

    logger.info(f"backup: {path} -> {target}")
    return target


def dump_document(document: Any) -> str:
    return yaml.safe_dump(
        document,
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
    )


def merge_colors(config: dict, theme_document: Any, theme_path: Path = None) -> dict:
    """
    Return a copy of config with its `colors` block replaced by the theme's.

    Raises:
        DocumentParseError: Theme document has no `colors` mapping
    """
    if not isinstance(theme_document, dict) or not isinstance(
        theme_document.get(COLORS_KEY), dict
    ):
        raise DocumentParseError(theme_path, f"no '{COLORS_KEY}' section")

    merged = dict(config)
    merged[COLORS_KEY] = theme_document[COLORS_KEY]
    return merged


def write_atomic(path: Path, text: str) -> None:
    """
    Replace a file's contents via a temp file in the same directory.

    A symlinked path is followed, so the link target is rewritten and the
    link itself stays in place.

    Raises:
        WriteBackError: Temp file could not be written or renamed
    """
    path = Path(path).resolve()
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    except OSError as e:
        raise WriteBackError(path, e) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except OSError as e:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise WriteBackError(path, e) from e


class ConfigMerger:
    """
    Reads, rewrites and backs up the alacritty configuration file.

    Usage:
        merger = ConfigMerger(Environment.from_env())
        merger.apply(merger.resolve_theme("dracula"))
        merger.current_theme_name()
    """

    def __init__(self, env: Environment, config_path: Path = None):
        self.env = env
        self._config_path = Path(config_path) if config_path else None

    def locate_config(self) -> Path:
        """
        Find the configuration file.

        Returns:
            First existing path out of env.config_candidates

        Raises:
            EnvironmentConfigError: No candidate exists
        """
        if self._config_path is not None:
            if not self._config_path.exists():
                raise EnvironmentConfigError(
                    f"alacritty cfg: '{self._config_path}' not found!"
                )
            return self._config_path

        for candidate in self.env.iter_config_candidates():
            if candidate.exists():
                logger.debug(f"Using config file {candidate}")
                self._config_path = candidate
                return candidate

        searched = ", ".join(str(p) for p in self.env.config_candidates)
        raise EnvironmentConfigError(f"Config file not found (searched: {searched})")

    def resolve_theme(self, name: str) -> Path:
        """
        Path of a theme given by name, '.yml' added when missing.

        Raises:
            ThemeNotFoundError: No such file in the themes directory
        """
        filename = name if name.endswith(THEME_SUFFIX) else f"{name}{THEME_SUFFIX}"
        path = self.env.themes_dir / filename
        if not path.is_file():
            raise ThemeNotFoundError(name, path)
        return path

    def load_config(self) -> dict:
        """
        Parse the configuration file.

        An empty file is an empty mapping.

        Raises:
            DocumentParseError: Unreadable, not YAML, or not a mapping
        """
        path = self.locate_config()
        document = read_document(path)
        if document is None:
            return {}
        if not isinstance(document, dict):
            raise DocumentParseError(path, "configuration must be a mapping")
        return document

    def apply(self, theme_path: Path) -> ApplyResult:
        """
        Replace the config's colors with those of a theme file.

        Both documents are parsed before anything is written. The config is
        backed up once, then rewritten atomically.

        Args:
            theme_path: Theme YAML file

        Returns:
            ApplyResult with the backup path if one was created

        Raises:
            EnvironmentConfigError: Config file not found
            DocumentParseError: Config or theme malformed
            WriteBackError: Rewriting the config failed
        """
        theme_path = Path(theme_path)
        config_path = self.locate_config()
        config = self.load_config()
        merged = merge_colors(config, read_document(theme_path), theme_path)
        text = dump_document(merged)

        had_backup = backup_path(config_path).exists()
        created = backup(config_path)
        write_atomic(config_path, text)

        logger.info(f"Applied theme {theme_path.name} to {config_path}")
        return ApplyResult(
            config_path=config_path,
            theme_path=theme_path,
            backup_path=created,
            backup_failed=not had_backup and created is None,
        )

    def apply_by_name(self, name: str) -> ApplyResult:
        return self.apply(self.resolve_theme(name))

    def current_theme_name(self) -> str:
        """
        Name recorded in the config's `colors` block.

        Returns:
            The name, or NAME_NOT_FOUND

        Raises:
            EnvironmentConfigError: Config file not found
            DocumentParseError: Config malformed
        """
        config = self.load_config()
        colors = config.get(COLORS_KEY)
        if isinstance(colors, dict) and isinstance(colors.get("name"), str):
            return colors["name"]
        return NAME_NOT_FOUND
