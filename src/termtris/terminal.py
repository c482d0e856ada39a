"""Curses front-end: draws the game and reads the keyboard.

The board is drawn two terminal columns per cell so squares look square,
with the score to the right of the playfield.
"""

from __future__ import annotations

import curses
import os
import time
from contextlib import contextmanager
from typing import Iterator, Optional

from .board import HEIGHT
from .errors import TerminalInitError
from .events import InputEvent, error_event, map_key
from .game_state import GameState
from .utils import ACTIVE, EMPTY, render_grid

# Seconds the final score stays on screen after a game over
GAME_OVER_DELAY = 2.0

PAIR_BOARD = 1
PAIR_ACTIVE = 2
PAIR_MESSAGE = 3


def _init_colors() -> bool:
    if not curses.has_colors():
        return False
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(PAIR_BOARD, curses.COLOR_WHITE, -1)
    curses.init_pair(PAIR_ACTIVE, curses.COLOR_CYAN, -1)
    curses.init_pair(PAIR_MESSAGE, curses.COLOR_RED, -1)
    return True


class CursesTerminal:
    """Renderer and input source backed by a curses screen."""

    def __init__(self, stdscr, colors: bool = True) -> None:
        self.stdscr = stdscr
        self.colors = colors

    def _attr(self, pair: int) -> int:
        return curses.color_pair(pair) if self.colors else 0

    def _put(self, y: int, x: int, text: str, pair: int) -> None:
        try:
            self.stdscr.addstr(y, x, text, self._attr(pair))
        except curses.error:
            # Clipped by a terminal smaller than the playfield.
            pass

    def draw(self, state: GameState) -> None:
        """Redraw board, active piece and score, then flush."""

        grid = render_grid(state.board, state.active)
        self.stdscr.erase()
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                char = "." if cell == EMPTY else "#"
                pair = PAIR_ACTIVE if cell == ACTIVE else PAIR_BOARD
                self._put(y, x * 2, char, pair)
        self._put(0, state.board.width * 2 + 2, f"Score: {state.score}", PAIR_BOARD)
        self.stdscr.refresh()

    def show_game_over(
        self, score: int, row: int = HEIGHT // 2, delay: float = GAME_OVER_DELAY
    ) -> None:
        """Show the final score on a cleared screen for ``delay`` seconds."""

        self.stdscr.erase()
        self._put(row, 0, f"Game Over! Final Score: {score}", PAIR_MESSAGE)
        self.stdscr.refresh()
        time.sleep(delay)

    def read(self) -> Optional[InputEvent]:
        """Return the pending key press, or ``None`` if no key is waiting."""

        try:
            code = self.stdscr.getch()
        except curses.error as exc:
            return error_event(str(exc))
        if code == -1:
            return None
        return map_key(code)


@contextmanager
def terminal_session() -> Iterator[CursesTerminal]:
    """Open a curses session and restore the terminal on exit.

    Raises:
        TerminalInitError: If the terminal cannot be put into curses mode.
    """

    # Keep Esc responsive; curses otherwise waits a full second for a
    # possible escape sequence.
    os.environ.setdefault("ESCDELAY", "25")
    try:
        stdscr = curses.initscr()
    except curses.error as exc:
        raise TerminalInitError(f"Cannot initialise terminal: {exc}") from exc
    try:
        try:
            curses.noecho()
            curses.cbreak()
            stdscr.keypad(True)
            stdscr.nodelay(True)
            colors = _init_colors()
        except curses.error as exc:
            raise TerminalInitError(f"Cannot configure terminal: {exc}") from exc
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        yield CursesTerminal(stdscr, colors=colors)
    finally:
        stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
