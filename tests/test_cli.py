"""Tests for the command line, via click's CliRunner."""

import yaml
import pytest
from click.testing import CliRunner

from alacritty_themes import cli as cli_module
from alacritty_themes.cli import cli
from alacritty_themes.manager.merge import NAME_NOT_FOUND
from alacritty_themes.picker import app as picker_app

from samples import DRACULA_YML


@pytest.fixture
def runner():
    return CliRunner()


def test_print_current_theme_sentinel(runner, env_vars, config_file):
    result = runner.invoke(cli, ["-p"], env=env_vars)
    assert result.exit_code == 0
    assert result.output.strip() == NAME_NOT_FOUND


def test_apply_by_name(runner, env_vars, themes_dir, config_file):
    result = runner.invoke(cli, ["dracula"], env=env_vars)
    assert result.exit_code == 0, result.output
    assert "backup:" in result.output
    assert f"Applied dracula to {config_file}" in result.output
    colors = yaml.safe_load(config_file.read_text())["colors"]
    assert colors == yaml.safe_load(DRACULA_YML)["colors"]

    result = runner.invoke(cli, ["--print-current-theme"], env=env_vars)
    assert result.output.strip() == "Dracula"


def test_apply_with_suffix(runner, env_vars, themes_dir, config_file):
    result = runner.invoke(cli, ["dracula.yml"], env=env_vars)
    assert result.exit_code == 0, result.output


def test_unknown_theme(runner, env_vars, themes_dir, config_file):
    result = runner.invoke(cli, ["nord"], env=env_vars)
    assert result.exit_code == 1
    assert "Theme 'nord' not found" in result.output


def test_broken_theme(runner, env_vars, themes_dir, config_file):
    before = config_file.read_text()
    result = runner.invoke(cli, ["broken"], env=env_vars)
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert config_file.read_text() == before


def test_missing_config(runner, env_vars, themes_dir):
    result = runner.invoke(cli, ["-p"], env=env_vars)
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_missing_xdg_config_home(runner, env_vars):
    env_vars["XDG_CONFIG_HOME"] = None
    result = runner.invoke(cli, ["-p"], env=env_vars)
    assert result.exit_code == 1
    assert "XDG_CONFIG_HOME" in result.output


def test_list(runner, env_vars, themes_dir):
    result = runner.invoke(cli, ["--list"], env=env_vars)
    assert result.exit_code == 0
    assert result.output.splitlines() == ["broken", "dracula"]


def test_missing_themes_dir(runner, env_vars, tmp_path):
    result = runner.invoke(cli, ["-l", "--themes-dir", str(tmp_path / "nope")], env=env_vars)
    assert result.exit_code == 1
    assert "Themes dir not found" in result.output


def test_config_override(runner, env_vars, themes_dir, tmp_path):
    custom = tmp_path / "custom.yml"
    custom.write_text("font:\n  size: 9\n")
    result = runner.invoke(cli, ["dracula", "--config", str(custom)], env=env_vars)
    assert result.exit_code == 0, result.output
    data = yaml.safe_load(custom.read_text())
    assert data["font"] == {"size": 9}
    assert data["colors"]["name"] == "Dracula"


def test_no_arguments_launches_picker(runner, env_vars, themes_dir, config_file, monkeypatch):
    calls = []

    def fake_run_picker(catalog, merger):
        calls.append((catalog.list_themes(), merger.locate_config()))

    monkeypatch.setattr(picker_app, "run_picker", fake_run_picker)
    result = runner.invoke(cli, [], env=env_vars)
    assert result.exit_code == 0, result.output
    assert calls == [(["broken", "dracula"], config_file)]


def test_configure_logging_levels(monkeypatch):
    seen = []
    monkeypatch.setattr(cli_module.logging, "basicConfig", lambda **kw: seen.append(kw["level"]))
    for verbosity in (0, 1, 2, 3):
        cli_module.configure_logging(verbosity)
    assert seen == [30, 20, 10, 10]


def test_non_utf8_config_is_reported(runner, env_vars, themes_dir, config_file):
    config_file.write_bytes(b"font:\n  normal:\n    family: caf\xe9\n")
    result = runner.invoke(cli, ["dracula"], env=env_vars)
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "UTF-8" in result.output


def test_print_from_home_config_without_xdg(runner, env_vars, home):
    (home / "alacritty.yml").write_text("colors:\n  name: Home\n")
    env_vars["XDG_CONFIG_HOME"] = None
    result = runner.invoke(cli, ["-p"], env=env_vars)
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "Home"


def test_overrides_without_environment(runner, themes_dir, tmp_path):
    custom = tmp_path / "custom.yml"
    custom.write_text("font:\n  size: 9\n")
    args = ["dracula", "--config", str(custom), "--themes-dir", str(themes_dir)]
    result = runner.invoke(cli, args, env={"HOME": None, "XDG_CONFIG_HOME": None})
    assert result.exit_code == 0, result.output
    assert yaml.safe_load(custom.read_text())["colors"]["name"] == "Dracula"
