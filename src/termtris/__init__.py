"""Terminal Tetris: a falling-block puzzle game rendered with curses."""

import logging

from .board import Board
from .shapes import TetrominoType, shape, shapes
from .piece import Piece, collides, spawn
from .game_state import GameState, GameStatus
from .events import EventKind, InputEvent, map_key
from .loop import EventLoop
from .utils import render_grid
from .errors import GameFinishedError, InputError, TerminalInitError, TermtrisError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Board",
    "TetrominoType",
    "Piece",
    "GameState",
    "GameStatus",
    "EventKind",
    "InputEvent",
    "EventLoop",
    "TermtrisError",
    "TerminalInitError",
    "InputError",
    "GameFinishedError",
    "collides",
    "spawn",
    "shape",
    "shapes",
    "map_key",
    "render_grid",
]
