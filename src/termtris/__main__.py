"""Terminal Tetris.

Run with: `python -m termtris` (or the ``termtris`` console script).

Arrow keys move and rotate the falling piece, Esc quits.
"""

from __future__ import annotations

import asyncio

from .errors import TermtrisError
from .game_state import GameState, GameStatus
from .loop import EventLoop
from .terminal import terminal_session


def main() -> None:
    try:
        with terminal_session() as terminal:
            state = GameState()
            state.reset_game()
            status = asyncio.run(EventLoop(state, terminal, terminal).run())
            if status is GameStatus.GAME_OVER:
                terminal.show_game_over(state.score, row=state.board.height // 2)
    except TermtrisError as exc:
        raise SystemExit(f"termtris: {exc}") from exc


if __name__ == "__main__":
    main()
