"""Tetromino catalog.

Every piece lives in a fixed 5x5 frame regardless of its true bounding box.
This keeps rotation a single matrix operation for all seven kinds at the cost
of a few wasted cells.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple

import numpy as np
from numpy.typing import NDArray

Mask = NDArray[np.bool_]


class TetrominoType(str, Enum):
    """Enumeration of the seven standard tetromino shapes."""

    I = "I"
    O = "O"
    T = "T"
    L = "L"
    J = "J"
    S = "S"
    Z = "Z"


# Spawn orientation of each shape drawn in its 5x5 frame.  ``X`` marks an
# occupied cell.
_SHAPE_ART: Dict[TetrominoType, List[str]] = {
    TetrominoType.I: [
        ".....",
        ".....",
        "XXXX.",
        ".....",
        ".....",
    ],
    TetrominoType.O: [
        ".....",
        ".....",
        ".XX..",
        ".XX..",
        ".....",
    ],
    TetrominoType.T: [
        ".....",
        ".....",
        ".XXX.",
        "..X..",
        ".....",
    ],
    TetrominoType.L: [
        ".....",
        ".....",
        "XXX..",
        "X....",
        ".....",
    ],
    TetrominoType.J: [
        ".....",
        ".....",
        "XXX..",
        "..X..",
        ".....",
    ],
    TetrominoType.S: [
        ".....",
        ".....",
        ".XX..",
        "XX...",
        ".....",
    ],
    TetrominoType.Z: [
        ".....",
        ".....",
        "XX...",
        ".XX..",
        ".....",
    ],
}


def _parse(art: List[str]) -> Mask:
    """Convert a list of ``./X`` strings into a read-only boolean mask."""

    mask = np.array([[char == "X" for char in row] for row in art], dtype=np.bool_)
    mask.setflags(write=False)
    return mask


SHAPES: Dict[TetrominoType, Mask] = {
    t_type: _parse(art) for t_type, art in _SHAPE_ART.items()
}

_ORDERED: Tuple[Mask, ...] = tuple(SHAPES[t_type] for t_type in TetrominoType)


def shapes() -> Tuple[Mask, ...]:
    """Return the seven catalog masks in ``TetrominoType`` order.

    The masks are read-only; callers that need a mutable copy (the active
    piece) must copy them.
    """

    return _ORDERED


def shape(kind: TetrominoType) -> Mask:
    """Return the catalog mask for ``kind``."""

    return SHAPES[kind]
