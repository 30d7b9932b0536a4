"""
Interactive theme picker.

Curses front end: theme list on the left, palette preview on the right.

Keys:
    j / Down    next theme
    k / Up      previous theme
    g / G       top / bottom
    a           apply highlighted theme
    q / Esc     quit
"""

from __future__ import annotations
import curses
import locale
import logging
from enum import Enum, auto
from typing import Optional

from ..errors import AlacrittyThemesError
from ..manager.merge import ConfigMerger
from ..theme.color import RGB, nearest_basic, nearest_xterm256
from ..theme.engine import ThemeCatalog, load_theme_or_default
from ..theme.preview import PreviewLine, format_line, render_preview
from .state import SelectionState

logger = logging.getLogger(__name__)

TITLE = "Themes switcher"
FOOTER = "Use ↓↑ to move, a to apply theme, g/G to go top/bottom, q to quit."
KEY_ESCAPE = 27


class Action(Enum):
    """Logical picker events."""
    NEXT = auto()
    PREVIOUS = auto()
    TOP = auto()
    BOTTOM = auto()
    APPLY = auto()
    QUIT = auto()


_KEYMAP = {
    ord("j"): Action.NEXT,
    curses.KEY_DOWN: Action.NEXT,
    ord("k"): Action.PREVIOUS,
    curses.KEY_UP: Action.PREVIOUS,
    ord("g"): Action.TOP,
    ord("G"): Action.BOTTOM,
    ord("a"): Action.APPLY,
    ord("q"): Action.QUIT,
    KEY_ESCAPE: Action.QUIT,
}


def key_to_action(key: int) -> Optional[Action]:
    """Map a curses key code to a picker action, None if unbound."""
    return _KEYMAP.get(key)


def dispatch(state: SelectionState, action: Action) -> Optional[str]:
    """
    Run one action against the selection.

    Returns:
        Status line text, or None to leave the status unchanged
    """
    if action is Action.NEXT:
        state.next()
    elif action is Action.PREVIOUS:
        state.previous()
    elif action is Action.TOP:
        state.go_top()
    elif action is Action.BOTTOM:
        state.go_bottom()
    elif action is Action.APPLY:
        try:
            result = state.apply()
        except AlacrittyThemesError as e:
            logger.debug(f"Apply failed: {e}")
            return f"Error: {e}"
        if result is None:
            return "No theme selected"
        message = f"Applied {result.theme_path.stem}"
        if result.backup_path:
            message += f" (backup: {result.backup_path.name})"
        elif result.backup_failed:
            message += " (warning: backup failed, no safety copy made)"
        return message
    return None


class SwatchPalette:
    """Allocates curses color pairs for swatches on demand."""

    def __init__(self):
        self.enabled = curses.has_colors()
        if self.enabled:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error as e:
                logger.debug(f"Default terminal colors unavailable: {e}")
        self._pairs: dict[tuple[int, int], int] = {}

    def _index(self, rgb: RGB) -> int:
        if curses.COLORS >= 256:
            return nearest_xterm256(rgb)
        return nearest_basic(rgb)

    def attr(self, fg: RGB, bg: RGB) -> int:
        """Attribute drawing fg on bg; reverse video when colors run out."""
        if not self.enabled:
            return curses.A_REVERSE
        key = (self._index(fg), self._index(bg))
        pair = self._pairs.get(key)
        if pair is None:
            pair = len(self._pairs) + 1
            if pair >= curses.COLOR_PAIRS:
                return curses.A_REVERSE
            curses.init_pair(pair, *key)
            self._pairs[key] = pair
        return curses.color_pair(pair)


class StatusHandler(logging.Handler):
    """Routes log records into the picker's status line."""

    def __init__(self, app: PickerApp, level=logging.WARNING):
        super().__init__(level)
        self.app = app

    def emit(self, record: logging.LogRecord) -> None:
        self.app.status = self.format(record)


class PickerApp:
    """
    Draws the picker and feeds key presses to the selection.

    Usage:
        app = PickerApp(SelectionState(catalog.entries, merger))
        curses.wrapper(app.run)
    """

    def __init__(self, state: SelectionState):
        self.state = state
        self.status = ""
        self._scroll = 0
        self._palette: Optional[SwatchPalette] = None

    def run(self, stdscr) -> None:
        """Event loop; returns on quit."""
        curses.curs_set(0)
        stdscr.keypad(True)
        self._palette = SwatchPalette()

        while True:
            self.draw(stdscr)
            action = key_to_action(stdscr.getch())
            if action is None:
                continue
            if action is Action.QUIT:
                return
            status = dispatch(self.state, action)
            if status is not None:
                self.status = status

    # -- drawing --------------------------------------------------------

    def draw(self, stdscr) -> None:
        stdscr.erase()
        height, width = stdscr.getmaxyx()

        _put(stdscr, 0, max(0, (width - len(TITLE)) // 2), TITLE, curses.A_BOLD)

        body_top = 2
        body_height = max(0, height - body_top - 3)
        half = width // 2
        self._draw_list(stdscr, body_top, 0, body_height, half)
        self._draw_info(stdscr, body_top, half, body_height, width - half)

        _put(stdscr, height - 2, 1, self.status[: max(0, width - 2)])
        _put(stdscr, height - 1, max(0, (width - len(FOOTER)) // 2), FOOTER, curses.A_DIM)
        stdscr.refresh()

    def _draw_list(self, stdscr, top: int, left: int, height: int, width: int) -> None:
        _put(stdscr, top, left + max(0, (width - 11) // 2), "Themes List", curses.A_BOLD)
        rows = height - 1
        if rows <= 0:
            return

        cursor = self.state.selected
        if cursor is not None:
            if cursor < self._scroll:
                self._scroll = cursor
            elif cursor >= self._scroll + rows:
                self._scroll = cursor - rows + 1

        visible = self.state.entries[self._scroll:self._scroll + rows]
        for offset, entry in enumerate(visible):
            index = self._scroll + offset
            if index == cursor:
                text = f">{entry.name}"
                attr = curses.A_BOLD | curses.A_REVERSE
            else:
                text = f" {entry.name}"
                attr = curses.A_NORMAL
            _put(stdscr, top + 1 + offset, left, text[: width - 1], attr)

    def _draw_info(self, stdscr, top: int, left: int, height: int, width: int) -> None:
        _put(stdscr, top, left + max(0, (width - 4) // 2), "Info", curses.A_BOLD)

        # Re-read every frame so edits to theme files show up immediately
        colors = load_theme_or_default(self.state.preview_entry.path)
        lines = render_preview(colors)

        for row, line in enumerate(lines[: max(0, height - 1)]):
            self._draw_preview_line(stdscr, top + 1 + row, left + 1, width - 2, line)

    def _draw_preview_line(self, stdscr, y: int, x: int, width: int, line: PreviewLine) -> None:
        if line.is_heading:
            _put(stdscr, y, x, format_line(line)[:width])
            return

        label = f"{'  ' * line.indent}{line.label}: "
        _put(stdscr, y, x, label[:width])
        remaining = width - len(label)
        if remaining <= 0:
            return
        if line.swatch is None:
            attr = curses.A_BOLD
        else:
            attr = self._palette.attr(line.text_color, line.swatch) | curses.A_BOLD
        _put(stdscr, y, x + len(label), line.value[:remaining], attr)


def _put(stdscr, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
    """addstr that ignores writes past the window edge."""
    if not text:
        return
    try:
        stdscr.addstr(y, x, text, attr)
    except curses.error:
        # Writing the bottom-right cell raises after the text is drawn
        pass


def run_picker(catalog: ThemeCatalog, merger: ConfigMerger) -> None:
    """
    Run the interactive picker until the user quits.

    Raises:
        EnvironmentConfigError: Themes dir or config file missing, or no themes
    """
    merger.locate_config()
    state = SelectionState(catalog.entries, merger)
    app = PickerApp(state)
    locale.setlocale(locale.LC_ALL, "")

    # The screen belongs to curses while the picker runs
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    root.handlers = [StatusHandler(app)]
    try:
        curses.wrapper(app.run)
    finally:
        root.handlers = saved_handlers
