"""
Environment for alacritty_themes.

Resolved once at startup from HOME and XDG_CONFIG_HOME and handed to the
catalog and the merge engine.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Mapping, Optional

from .errors import EnvironmentConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "alacritty.yml"
APP_DIRNAME = "alacritty"
THEMES_DIRNAME = "themes"
THEME_SUFFIX = ".yml"


@dataclass(frozen=True)
class Environment:
    """
    Filesystem locations the tool works with.

    HOME and XDG_CONFIG_HOME are read once; a missing one is only an error
    when a location that needs it is asked for.

    Usage:
        env = Environment.from_env()
        env.themes_dir          # $XDG_CONFIG_HOME/alacritty/themes
        env.config_candidates   # lookup order for alacritty.yml
    """
    home: Optional[Path]
    config_home: Optional[Path]

    # Explicit overrides (e.g. from the command line)
    config_override: Optional[Path] = None
    themes_override: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> Environment:
        """Build from HOME and XDG_CONFIG_HOME; unset or empty values become None."""
        environ = os.environ if environ is None else environ
        home = environ.get("HOME") or None
        config_home = environ.get("XDG_CONFIG_HOME") or None
        logger.debug(f"Environment: HOME={home} XDG_CONFIG_HOME={config_home}")
        return cls(
            home=Path(home) if home else None,
            config_home=Path(config_home) if config_home else None,
        )

    def with_overrides(
        self,
        config_path: Optional[Path] = None,
        themes_dir: Optional[Path] = None,
    ) -> Environment:
        """Return a copy pinned to an explicit config file and/or themes dir."""
        return Environment(
            home=self.home,
            config_home=self.config_home,
            config_override=Path(config_path) if config_path else self.config_override,
            themes_override=Path(themes_dir) if themes_dir else self.themes_override,
        )

    @property
    def alacritty_dir(self) -> Path:
        """$XDG_CONFIG_HOME/alacritty; EnvironmentConfigError when the variable is unset."""
        return _require(self.config_home, "XDG_CONFIG_HOME") / APP_DIRNAME

    @property
    def themes_dir(self) -> Path:
        if self.themes_override is not None:
            return self.themes_override
        return self.alacritty_dir / THEMES_DIRNAME

    def iter_config_candidates(self) -> Iterator[Path]:
        """
        Config file locations in lookup order.

        Lazy, so a hit on ~/alacritty.yml never needs XDG_CONFIG_HOME.
        """
        if self.config_override is not None:
            yield self.config_override
            return
        yield _require(self.home, "HOME") / CONFIG_FILENAME
        yield self.alacritty_dir / CONFIG_FILENAME

    @property
    def config_candidates(self) -> list[Path]:
        """Config file locations, first existing one wins."""
        return list(self.iter_config_candidates())


def _require(value: Optional[Path], name: str) -> Path:
    if value is None:
        raise EnvironmentConfigError(f"Failed to get {name} env var!")
    return value
