"""Utility helpers shared by the engine and renderers."""

from __future__ import annotations

from typing import Optional

import numpy as np
from numpy.typing import NDArray

from .board import Board
from .piece import Piece


# Milliseconds between automatic downward moves
GRAVITY_MS = 500

# Cell codes produced by ``render_grid``.
EMPTY = 0
LOCKED = 1
ACTIVE = 2


def render_grid(board: Board, active: Optional[Piece] = None) -> NDArray[np.uint8]:
    """Return a copy of the board grid with the active piece overlaid.

    Renderers get a single 2D array to draw without mutating the underlying
    board state.  Locked cells are ``LOCKED`` and cells covered by the active
    piece are ``ACTIVE``; active cells outside the board are dropped.
    """

    grid = np.where(board.grid, LOCKED, EMPTY).astype(np.uint8)
    if active is not None:
        for x, y in active.cells():
            if 0 <= y < board.height and 0 <= x < board.width:
                grid[y, x] = ACTIVE
    return grid
