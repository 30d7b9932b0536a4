"""
alacritty_themes/cli.py

Command-line interface.

Usage:
    alacritty-themes                 # interactive picker
    alacritty-themes dracula         # apply themes/dracula.yml
    alacritty-themes -p              # print current theme name
    alacritty-themes -l              # list available themes
"""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .config import Environment
from .errors import AlacrittyThemesError
from .manager.merge import ConfigMerger
from .theme.engine import ThemeCatalog

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbosity: int) -> None:
    """0 -> WARNING, 1 -> INFO, 2+ -> DEBUG, on stderr."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("theme_name", required=False)
@click.option("-p", "--print-current-theme", is_flag=True, help="Print current theme name")
@click.option("-l", "--list", "list_themes", is_flag=True, help="List available themes")
@click.option(
    "--config", "config_path", default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Alacritty config file (default: ~/alacritty.yml or $XDG_CONFIG_HOME/alacritty/alacritty.yml)",
)
@click.option(
    "--themes-dir", default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Themes directory (default: $XDG_CONFIG_HOME/alacritty/themes)",
)
@click.option("-v", "--verbose", count=True, help="Increase log verbosity (-v, -vv)")
@click.version_option(__version__, prog_name="alacritty-themes")
def cli(theme_name, print_current_theme, list_themes, config_path, themes_dir, verbose):
    """Browse alacritty color themes and apply one to alacritty.yml."""
    configure_logging(verbose)

    try:
        env = Environment.from_env().with_overrides(config_path, themes_dir)
        merger = ConfigMerger(env)

        if print_current_theme:
            click.echo(merger.current_theme_name())
            return

        catalog = ThemeCatalog.from_environment(env)

        if list_themes:
            for name in catalog.list_themes():
                click.echo(name)
            return

        if theme_name:
            result = merger.apply_by_name(theme_name)
            if result.backup_path:
                click.echo(f"backup: {result.config_path} -> {result.backup_path}")
            click.echo(f"Applied {result.theme_path.stem} to {result.config_path}")
            return

        # Imported here so the non-interactive paths never touch curses
        from .picker.app import run_picker
        run_picker(catalog, merger)

    except AlacrittyThemesError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli(prog_name="alacritty-themes")


if __name__ == "__main__":
    main()
