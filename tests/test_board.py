from __future__ import annotations

import random

import numpy as np
import pytest

from termtris.board import HEIGHT, WIDTH, Board
from termtris.piece import Piece, spawn
from termtris.shapes import TetrominoType, shape


def fill_row(board: Board, y: int, *, gap: int | None = None) -> None:
    board.grid[y] = True
    if gap is not None:
        board.grid[y, gap] = False


def compact_reference(grid: np.ndarray) -> tuple[np.ndarray, int]:
    """Remove every full row at once and pad with empty rows on top."""

    full_rows = np.all(grid, axis=1)
    cleared = int(np.count_nonzero(full_rows))
    remaining = grid[~full_rows]
    new_rows = np.zeros((cleared, grid.shape[1]), dtype=grid.dtype)
    return np.vstack((new_rows, remaining)), cleared


def test_new_board_is_empty():
    board = Board()
    assert (board.width, board.height) == (WIDTH, HEIGHT)
    assert board.grid.shape == (HEIGHT, WIDTH)
    assert not board.grid.any()


@pytest.mark.parametrize("width,height", [(0, 20), (10, 0), (-1, 5)])
def test_invalid_dimensions_rejected(width, height):
    with pytest.raises(ValueError):
        Board(width, height)


def test_is_occupied_requires_in_range_coordinates():
    board = Board()
    board.grid[19, 9] = True
    assert board.is_occupied(9, 19)
    assert not board.is_occupied(0, 0)
    for x, y in [(-1, 0), (10, 0), (0, 20), (0, -1)]:
        with pytest.raises(IndexError):
            board.is_occupied(x, y)


def test_merge_ignores_cells_outside_board():
    board = Board()
    # O occupies mask rows 2-3, cols 1-2 -> columns -1 and 0 here.
    piece = Piece(np.array(shape(TetrominoType.O)), x=-2, y=17)
    board.merge(piece)
    assert board.grid[19, 0]
    assert int(board.grid.sum()) == 1


def test_clear_single_full_row_shifts_rows_down():
    board = Board()
    board.grid[18, 0] = True
    fill_row(board, 19)
    assert board.clear_full_rows() == 1
    assert board.grid[19, 0]
    assert int(board.grid.sum()) == 1


def test_clear_non_adjacent_rows_keeps_partial_rows_in_order():
    board = Board()
    board.grid[15, 0] = True
    fill_row(board, 16)
    board.grid[17, 1] = True
    fill_row(board, 18)
    fill_row(board, 19)
    assert board.clear_full_rows() == 3
    assert board.grid[18, 0]
    assert board.grid[19, 1]
    assert int(board.grid.sum()) == 2


def test_adjacent_full_rows_cleared_in_one_call():
    board = Board()
    for y in range(16, 20):
        fill_row(board, y)
    assert board.clear_full_rows() == 4
    assert not board.grid.any()


def test_clear_counts_zero_when_nothing_is_full():
    board = Board()
    fill_row(board, 19, gap=3)
    before = board.grid.copy()
    assert board.clear_full_rows() == 0
    assert np.array_equal(board.grid, before)


def test_clear_matches_remove_then_compact():
    rng = random.Random(1234)
    for _ in range(200):
        board = Board()
        for y in range(board.height):
            roll = rng.random()
            if roll < 0.35:
                fill_row(board, y)
            elif roll < 0.7:
                fill_row(board, y, gap=rng.randrange(board.width))
        expected, expected_count = compact_reference(board.grid.copy())
        assert board.clear_full_rows() == expected_count
        assert np.array_equal(board.grid, expected)


def test_merge_without_full_row_is_reversible():
    board = Board()
    piece = spawn(shape(TetrominoType.T), board.width)
    board.merge(piece)
    assert board.clear_full_rows() == 0
    cells = set(piece.cells())
    assert {(int(x), int(y)) for y, x in zip(*np.nonzero(board.grid))} == cells
    for x, y in cells:
        board.grid[y, x] = False
    assert not board.grid.any()


def test_reset_empties_grid_in_place():
    board = Board()
    grid = board.grid
    fill_row(board, 5)
    board.reset()
    assert board.grid is grid
    assert not board.grid.any()
