"""Tetromino definitions and rotation.

Each playable shape is described by four ``(dx, dy)`` offsets around an
implicit pivot.  Offsets are authored with ``dy`` growing downward, so a cell
of a piece anchored at ``(x, y)`` lands on ``(x + dx, y - dy)`` of the board,
whose origin is the bottom-left corner.  There is no explicit pivot and no
wall kick table: rotation is a plain quarter turn of the four offsets.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, List, Tuple

Offset = Tuple[int, int]
Offsets = Tuple[Offset, Offset, Offset, Offset]
Color = Tuple[int, int, int]


class TetrominoType(str, Enum):
    """Cell value: one of the seven tetrominoes or the empty sentinel."""

    EMPTY = "."
    S = "S"
    Z = "Z"
    I = "I"
    T = "T"
    O = "O"
    J = "J"
    L = "L"


# The seven shapes a spawn may pick from, in draw order.
PLAYABLE_TYPES: Tuple[TetrominoType, ...] = tuple(
    t for t in TetrominoType if t is not TetrominoType.EMPTY
)


_BASE_SHAPES: Dict[TetrominoType, Offsets] = {
    TetrominoType.S: ((0, -1), (0, 0), (-1, 0), (-1, 1)),
    TetrominoType.Z: ((0, -1), (0, 0), (1, 0), (1, 1)),
    TetrominoType.I: ((0, -1), (0, 0), (0, 1), (0, 2)),
    TetrominoType.T: ((-1, 0), (0, 0), (1, 0), (0, 1)),
    TetrominoType.O: ((0, 0), (1, 0), (0, 1), (1, 1)),
    TetrominoType.J: ((-1, -1), (0, -1), (0, 0), (0, 1)),
    TetrominoType.L: ((1, -1), (0, -1), (0, 0), (0, 1)),
    TetrominoType.EMPTY: ((0, 0), (0, 0), (0, 0), (0, 0)),
}

SHAPE_COLORS: Dict[TetrominoType, Color] = {
    TetrominoType.S: (204, 102, 102),
    TetrominoType.Z: (102, 204, 102),
    TetrominoType.I: (104, 102, 204),
    TetrominoType.T: (204, 204, 102),
    TetrominoType.O: (204, 102, 204),
    TetrominoType.J: (204, 204, 204),
    TetrominoType.L: (218, 170, 0),
    TetrominoType.EMPTY: (0, 0, 0),
}


def is_rotatable(shape: TetrominoType) -> bool:
    """Return ``False`` for shapes that rotation leaves untouched."""

    return shape not in (TetrominoType.O, TetrominoType.EMPTY)


def rotate_cw(offsets: Offsets) -> Offsets:
    """Return ``offsets`` turned a quarter clockwise: ``(dx, dy) -> (-dy, dx)``."""

    return tuple((-dy, dx) for dx, dy in offsets)  # type: ignore[return-value]


def rotate_ccw(offsets: Offsets) -> Offsets:
    """Return ``offsets`` turned a quarter counter-clockwise: ``(dx, dy) -> (dy, -dx)``."""

    return tuple((dy, -dx) for dx, dy in offsets)  # type: ignore[return-value]


def shape_blocks(shape: TetrominoType, rotation: int = 0) -> Offsets:
    """Return the block offsets for ``shape`` after ``rotation`` quarter turns.

    Parameters
    ----------
    shape:
        The :class:`TetrominoType` to query.
    rotation:
        Number of clockwise quarter turns.  Negative values turn
        counter-clockwise.  Values are wrapped so any integer is accepted.
        Shapes that are not rotatable always return their spawn offsets.
    """

    offsets = _BASE_SHAPES[shape]
    if not is_rotatable(shape):
        return offsets
    for _ in range(rotation % 4):
        offsets = rotate_cw(offsets)
    return offsets


def shape_color(shape: TetrominoType) -> Color:
    """Return the RGB display color of ``shape``."""

    return SHAPE_COLORS[shape]


@dataclass(frozen=True)
class Tetromino:
    """Falling piece value.

    Instances are immutable; every move or rotation returns a new piece so a
    rejected candidate can simply be discarded.
    """

    shape: TetrominoType
    offsets: Offsets
    position: Tuple[int, int] = (0, 0)  # (x, y)

    @classmethod
    def empty(cls) -> "Tetromino":
        """Return the sentinel meaning that no piece is falling."""

        return cls(TetrominoType.EMPTY, _BASE_SHAPES[TetrominoType.EMPTY])

    @classmethod
    def spawn(cls, shape: TetrominoType, width: int, height: int) -> "Tetromino":
        """Return ``shape`` anchored right of centre with its top cell on the top row."""

        offsets = shape_blocks(shape)
        top = min(dy for _, dy in offsets)
        return cls(shape, offsets, (width // 2 + 1, height - 1 + top))

    @property
    def is_empty(self) -> bool:
        return self.shape is TetrominoType.EMPTY

    def moved(self, dx: int, dy: int) -> "Tetromino":
        """Return a copy translated by ``dx`` columns and ``dy`` rows (up is positive)."""

        x, y = self.position
        return replace(self, position=(x + dx, y + dy))

    def rotated_cw(self) -> "Tetromino":
        if not is_rotatable(self.shape):
            return self
        return replace(self, offsets=rotate_cw(self.offsets))

    def rotated_ccw(self) -> "Tetromino":
        if not is_rotatable(self.shape):
            return self
        return replace(self, offsets=rotate_ccw(self.offsets))

    def blocks(self) -> List[Tuple[int, int]]:
        """Return the absolute ``(x, y)`` board coordinates of the four cells."""

        x, y = self.position
        return [(x + dx, y - dy) for dx, dy in self.offsets]
