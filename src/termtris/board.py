"""Board representation for the Tetris playfield."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from .piece import Piece


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

Grid = NDArray[np.bool_]


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty ``(height, width)`` board grid."""

    return np.zeros((height, width), dtype=np.bool_)


class Board:
    """Tetris board holding the occupied cells.

    Row ``0`` is the top of the playfield.  The dimensions are fixed once the
    board is created; only cell contents change.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid board dimensions: {width}x{height}")
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def reset(self) -> None:
        """Empty every cell in place."""

        self.grid.fill(False)

    def is_occupied(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at column ``x``, row ``y`` is filled.

        Raises:
            IndexError: If the coordinates are outside the board.  Bounds
                checks belong to the caller (see :func:`termtris.piece.collides`).
        """
        if 0 <= y < self.height and 0 <= x < self.width:
            return bool(self.grid[y, x])
        raise IndexError("Cell out of bounds")

    def is_row_full(self, y: int) -> bool:
        return bool(self.grid[y].all())

    def merge(self, piece: "Piece") -> None:
        """Lock the piece's cells into the board grid.

        Cells that fall outside the board are skipped; a collision check
        before locking means this should not happen in play.
        """

        for x, y in piece.cells():
            if 0 <= y < self.height and 0 <= x < self.width:
                self.grid[y, x] = True

    def clear_full_rows(self) -> int:
        """Clear completed rows and return how many were removed.

        Rows are scanned from the bottom up.  After a full row is removed the
        rows above it shift down by one, so the same row index is checked
        again before the scan moves on.  Several full rows, adjacent or not,
        are therefore cleared in a single call.
        """

        cleared = 0
        y = self.height - 1
        while y >= 0:
            if not self.is_row_full(y):
                y -= 1
                continue
            cleared += 1
            self.grid[1 : y + 1] = self.grid[0:y].copy()
            self.grid[0] = False
        return cleared
