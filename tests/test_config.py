"""Tests for the Environment."""

from pathlib import Path

import pytest

from alacritty_themes.config import Environment
from alacritty_themes.errors import EnvironmentConfigError


def test_from_env():
    env = Environment.from_env({"HOME": "/home/u", "XDG_CONFIG_HOME": "/home/u/.config"})
    assert env.home == Path("/home/u")
    assert env.alacritty_dir == Path("/home/u/.config/alacritty")
    assert env.themes_dir == Path("/home/u/.config/alacritty/themes")


def test_config_candidates_order():
    env = Environment(home=Path("/h"), config_home=Path("/x"))
    assert env.config_candidates == [Path("/h/alacritty.yml"), Path("/x/alacritty/alacritty.yml")]


def test_missing_variables_are_none():
    env = Environment.from_env({"HOME": ""})
    assert env.home is None
    assert env.config_home is None


@pytest.mark.parametrize(
    "environ, missing",
    [
        ({"XDG_CONFIG_HOME": "/x"}, "HOME"),
        ({"HOME": "/h"}, "XDG_CONFIG_HOME"),
        ({"HOME": "", "XDG_CONFIG_HOME": "/x"}, "HOME"),
    ],
)
def test_missing_variables_fail_on_use(environ, missing):
    env = Environment.from_env(environ)
    with pytest.raises(EnvironmentConfigError) as excinfo:
        env.config_candidates
    assert missing in str(excinfo.value)


def test_home_candidate_needs_only_home():
    env = Environment.from_env({"HOME": "/h"})
    assert next(env.iter_config_candidates()) == Path("/h/alacritty.yml")
    with pytest.raises(EnvironmentConfigError):
        env.themes_dir


def test_overrides_need_no_variables():
    env = Environment.from_env({}).with_overrides(
        config_path=Path("/c/a.yml"), themes_dir=Path("/t")
    )
    assert env.config_candidates == [Path("/c/a.yml")]
    assert env.themes_dir == Path("/t")


def test_overrides():
    env = Environment(home=Path("/h"), config_home=Path("/x")).with_overrides(
        config_path=Path("/elsewhere/a.yml"), themes_dir=Path("/t")
    )
    assert env.config_candidates == [Path("/elsewhere/a.yml")]
    assert env.themes_dir == Path("/t")


def test_overrides_keep_defaults_when_unset():
    env = Environment(home=Path("/h"), config_home=Path("/x")).with_overrides()
    assert env.themes_dir == Path("/x/alacritty/themes")
    assert len(env.config_candidates) == 2
