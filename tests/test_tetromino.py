from __future__ import annotations

import pytest

from blockfall.tetromino import (
    PLAYABLE_TYPES,
    Tetromino,
    TetrominoType,
    is_rotatable,
    rotate_ccw,
    rotate_cw,
    shape_blocks,
    shape_color,
)


ROTATABLE = [t for t in PLAYABLE_TYPES if t is not TetrominoType.O]


def test_playable_types_exclude_empty() -> None:
    assert len(PLAYABLE_TYPES) == 7
    assert TetrominoType.EMPTY not in PLAYABLE_TYPES


def test_every_shape_has_four_cells() -> None:
    for shape in TetrominoType:
        assert len(shape_blocks(shape)) == 4


def test_rotation_formulas() -> None:
    offsets = ((1, 2), (0, 0), (-3, 1), (2, -1))
    assert rotate_cw(offsets) == ((-2, 1), (0, 0), (-1, -3), (1, 2))
    assert rotate_ccw(offsets) == ((2, -1), (0, 0), (1, 3), (-1, -2))


@pytest.mark.parametrize("shape", ROTATABLE)
def test_cw_then_ccw_restores_offsets(shape: TetrominoType) -> None:
    piece = Tetromino.spawn(shape, 10, 22)
    assert piece.rotated_cw().rotated_ccw() == piece
    assert piece.rotated_ccw().rotated_cw() == piece


@pytest.mark.parametrize("shape", ROTATABLE)
def test_four_quarter_turns_are_identity(shape: TetrominoType) -> None:
    assert shape_blocks(shape, 4) == shape_blocks(shape)
    assert shape_blocks(shape, -1) == shape_blocks(shape, 3)
    assert shape_blocks(shape, 1) != shape_blocks(shape)


@pytest.mark.parametrize("shape", [TetrominoType.O, TetrominoType.EMPTY])
def test_fixed_shapes_ignore_rotation(shape: TetrominoType) -> None:
    assert not is_rotatable(shape)
    piece = Tetromino(shape, shape_blocks(shape), (4, 4))
    assert piece.rotated_cw() is piece
    assert piece.rotated_ccw() is piece
    assert shape_blocks(shape, 1) == shape_blocks(shape)


def test_spawn_puts_top_cell_on_top_row() -> None:
    for shape in PLAYABLE_TYPES:
        piece = Tetromino.spawn(shape, 10, 22)
        assert piece.position[0] == 6
        assert max(y for _, y in piece.blocks()) == 21


def test_i_piece_spawns_as_vertical_bar() -> None:
    piece = Tetromino.spawn(TetrominoType.I, 10, 22)
    assert piece.position == (6, 20)
    assert sorted(piece.blocks()) == [(6, 18), (6, 19), (6, 20), (6, 21)]


def test_moves_return_new_values() -> None:
    piece = Tetromino.spawn(TetrominoType.T, 10, 22)
    moved = piece.moved(-1, -2)
    assert moved.position == (piece.position[0] - 1, piece.position[1] - 2)
    assert piece.position == (6, 21)
    assert moved.offsets == piece.offsets


def test_empty_sentinel() -> None:
    empty = Tetromino.empty()
    assert empty.is_empty
    assert not Tetromino.spawn(TetrominoType.L, 10, 22).is_empty


def test_colors() -> None:
    assert shape_color(TetrominoType.S) == (204, 102, 102)
    assert shape_color(TetrominoType.L) == (218, 170, 0)
    assert shape_color(TetrominoType.EMPTY) == (0, 0, 0)
    assert len({shape_color(t) for t in PLAYABLE_TYPES}) == 7
