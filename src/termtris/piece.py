"""The active falling piece and collision detection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

import numpy as np

from .board import Board
from .shapes import Mask

MASK_SIZE = 5


@dataclass(eq=False)
class Piece:
    """Active falling piece in the game.

    ``mask`` is a 5x5 boolean frame and ``(x, y)`` is the board coordinate of
    its top-left corner.  The position may lie partly off the board; only
    :func:`collides` decides whether a placement is legal.
    """

    mask: Mask
    x: int = 0
    y: int = 0

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Yield the ``(x, y)`` board coordinates of every occupied cell."""

        rows, cols = np.nonzero(self.mask)
        for row, col in zip(rows.tolist(), cols.tolist()):
            yield self.x + col, self.y + row

    def rotated(self) -> "Piece":
        """Return a copy rotated 90 degrees clockwise inside its frame.

        ``rotated[row][col] == mask[4 - col][row]``.  The position is kept.
        """

        mask = np.rot90(self.mask, k=1, axes=(1, 0)).copy()
        return Piece(mask, self.x, self.y)

    def moved(self, dx: int, dy: int) -> "Piece":
        """Return a copy translated by ``dx`` columns and ``dy`` rows."""

        return Piece(self.mask, self.x + dx, self.y + dy)


def spawn(shape: Mask, board_width: int) -> Piece:
    """Create a piece for ``shape`` roughly centred on the top row."""

    return Piece(np.array(shape, dtype=np.bool_), x=board_width // 2 - MASK_SIZE // 2, y=0)


def collides(piece: Piece, board: Board) -> bool:
    """Return ``True`` if ``piece`` cannot occupy its position on ``board``.

    A cell collides when it is left or right of the board, below the floor, or
    on an occupied cell.  Cells above the top row (``y < 0``) only need to be
    within the side walls.
    """

    for x, y in piece.cells():
        if x < 0 or x >= board.width or y >= board.height:
            return True
        if y >= 0 and board.is_occupied(x, y):
            return True
    return False
