import numpy as np
import pytest

from termtris.shapes import SHAPES, TetrominoType, shape, shapes


def test_catalog_has_seven_5x5_tetrominoes():
    masks = shapes()
    assert len(masks) == 7
    for mask in masks:
        assert mask.shape == (5, 5)
        assert mask.dtype == np.bool_
        assert int(mask.sum()) == 4


def test_catalog_order_follows_tetromino_type():
    assert [m is SHAPES[t] for m, t in zip(shapes(), TetrominoType)] == [True] * 7
    assert shape(TetrominoType.O) is shapes()[1]


def test_o_shape_layout():
    rows, cols = np.nonzero(shape(TetrominoType.O))
    assert sorted(zip(rows.tolist(), cols.tolist())) == [(2, 1), (2, 2), (3, 1), (3, 2)]


def test_catalog_masks_are_read_only():
    mask = shape(TetrominoType.T)
    with pytest.raises(ValueError):
        mask[0, 0] = True
