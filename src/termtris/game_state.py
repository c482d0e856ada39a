"""High level game state container and rules engine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from .board import Board
from .errors import GameFinishedError
from .piece import Piece, collides, spawn
from .shapes import shapes

LOGGER = logging.getLogger(__name__)

# Points awarded for each cleared row.
LINE_SCORE = 100


class GameStatus(str, Enum):
    """Lifecycle of a game session."""

    SPAWNING = "spawning"
    FALLING = "falling"
    GAME_OVER = "game_over"
    EXITED = "exited"


@dataclass
class GameState:
    """Mutable state for a Tetris game session.

    All mutation goes through the public operations below, which the event
    loop calls one at a time.  Once ``finished`` is true the session is over
    and every operation raises :class:`GameFinishedError`.
    """

    board: Board = field(default_factory=Board)
    active: Optional[Piece] = None
    score: int = 0
    lines: int = 0
    status: GameStatus = GameStatus.SPAWNING
    rng: random.Random = field(default_factory=random.Random)

    @property
    def finished(self) -> bool:
        return self.status in (GameStatus.GAME_OVER, GameStatus.EXITED)

    def _check_running(self) -> None:
        if self.finished:
            raise GameFinishedError(f"Game already ended ({self.status.value})")

    def _require_active(self) -> Piece:
        """Return the active piece, raising if none has been spawned yet."""

        self._check_running()
        if self.active is None:
            raise RuntimeError("No active piece; call reset_game() first")
        return self.active

    def spawn_piece(self) -> Optional[Piece]:
        """Spawn a random piece at the top centre of the board.

        If the new piece overlaps the stack the game is over and ``None`` is
        returned.
        """

        self._check_running()
        self.status = GameStatus.SPAWNING
        piece = spawn(self.rng.choice(shapes()), self.board.width)
        if collides(piece, self.board):
            self.active = None
            self.status = GameStatus.GAME_OVER
            LOGGER.info("Game over. Final score: %d", self.score)
            return None
        self.active = piece
        self.status = GameStatus.FALLING
        return piece

    def reset_game(self) -> None:
        """Reset the entire game state for a new game."""

        self.board = Board(self.board.width, self.board.height)
        self.score = 0
        self.lines = 0
        self.active = None
        self.status = GameStatus.SPAWNING
        LOGGER.info("Game started")
        self.spawn_piece()

    def _try(self, candidate: Piece) -> bool:
        if collides(candidate, self.board):
            return False
        self.active = candidate
        return True

    def _lock(self, piece: Piece) -> None:
        """Merge ``piece``, clear rows, score them and respawn."""

        self.board.merge(piece)
        self.active = None
        cleared = self.board.clear_full_rows()
        if cleared:
            self.lines += cleared
            self.score += LINE_SCORE * cleared
            LOGGER.info("Cleared %d row(s). Score: %d", cleared, self.score)
        self.spawn_piece()

    def tick(self) -> None:
        """Apply one gravity step, locking the piece if it cannot fall."""

        piece = self._require_active()
        if not self._try(piece.moved(0, 1)):
            self._lock(piece)

    def soft_drop(self) -> None:
        """Move the piece down one row; identical to a gravity tick."""

        self.tick()

    def move_left(self) -> None:
        self._try(self._require_active().moved(-1, 0))

    def move_right(self) -> None:
        self._try(self._require_active().moved(1, 0))

    def rotate(self) -> None:
        """Rotate clockwise, or leave the piece untouched if that collides."""

        self._try(self._require_active().rotated())

    def quit(self) -> None:
        """End the session at the player's request."""

        self._check_running()
        self.status = GameStatus.EXITED
        LOGGER.info("Quit with score %d", self.score)
