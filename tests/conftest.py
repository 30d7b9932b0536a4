"""Pytest configuration and common fixtures for alacritty_themes tests."""

import os
import sys
from pathlib import Path

import pytest

# Add the project root to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from alacritty_themes.config import Environment

from samples import CONFIG_YML, DRACULA_YML


@pytest.fixture
def home(tmp_path) -> Path:
    """Fake HOME with an XDG config dir inside it."""
    path = tmp_path / "home"
    (path / ".config" / "alacritty" / "themes").mkdir(parents=True)
    return path


@pytest.fixture
def env(home) -> Environment:
    return Environment(home=home, config_home=home / ".config")


@pytest.fixture
def themes_dir(env) -> Path:
    """Themes dir holding a full theme and an empty one."""
    path = env.themes_dir
    (path / "dracula.yml").write_text(DRACULA_YML)
    (path / "broken.yml").write_text("")
    return path


@pytest.fixture
def config_file(env) -> Path:
    """alacritty.yml under $XDG_CONFIG_HOME/alacritty."""
    path = env.alacritty_dir / "alacritty.yml"
    path.write_text(CONFIG_YML)
    return path


@pytest.fixture
def env_vars(home):
    """Environment variables for CliRunner.invoke."""
    return {"HOME": str(home), "XDG_CONFIG_HOME": str(home / ".config")}
