"""Board representation for the playfield."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import Tetromino, TetrominoType


# Dimensions of the board.  Row 0 is the floor.
WIDTH = 10
HEIGHT = 22

Grid = NDArray[np.uint8]

# Mapping from ``TetrominoType`` to the integer stored in the grid.  ``EMPTY``
# is declared first so it maps to ``0``.
PIECE_VALUES = {t: i for i, t in enumerate(TetrominoType)}
VALUE_PIECES = {i: t for t, i in PIECE_VALUES.items()}


def create_empty_grid() -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((HEIGHT, WIDTH), dtype=np.uint8)


class Board:
    """Fixed size grid of locked cells, indexed ``grid[y, x]``.

    The row-major flattening of ``grid`` is the ``y * width + x`` cell index.
    """

    width: int = WIDTH
    height: int = HEIGHT

    def __init__(self) -> None:
        self.grid: Grid = create_empty_grid()

    def index(self, x: int, y: int) -> int:
        """Return the flat cell index of ``(x, y)``."""

        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def shape_at(self, x: int, y: int) -> TetrominoType:
        """Return the cell value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            return VALUE_PIECES[int(self.grid[y, x])]
        raise IndexError("Cell out of bounds")

    def set_shape(self, x: int, y: int, shape: TetrominoType) -> None:
        """Set the cell value at ``(x, y)``.

        Raises:
            IndexError: If the coordinates are outside the board.
        """
        if self.in_bounds(x, y):
            self.grid[y, x] = np.uint8(PIECE_VALUES[shape])
        else:
            raise IndexError("Cell out of bounds")

    def is_empty(self, x: int, y: int) -> bool:
        """Return ``True`` if the cell at ``(x, y)`` is empty.

        Any coordinates outside the board are treated as occupied so that
        off-board positions are rejected by the same check as collisions.
        """

        if self.in_bounds(x, y):
            return bool(self.grid[y, x] == 0)
        return False

    def is_clear(self) -> bool:
        return not self.grid.any()

    def lock_piece(self, tetromino: Tetromino) -> None:
        """Write the tetromino's cells into the grid using its own shape."""

        coordinates = np.asarray(tetromino.blocks(), dtype=np.int16)
        xs, ys = coordinates.T
        if (
            np.any(xs < 0)
            or np.any(xs >= self.width)
            or np.any(ys < 0)
            or np.any(ys >= self.height)
        ):
            raise IndexError("Block out of bounds")

        self.grid[ys, xs] = np.uint8(PIECE_VALUES[tetromino.shape])

    def clear_full_rows(self) -> int:
        """Remove completed rows and return how many were removed.

        Rows are scanned from the top down.  Each complete row is overwritten
        by shifting every row above it down by one.  The top row keeps its
        previous content after the shift; it is not refilled with empty cells.
        """

        cleared = 0
        for y in range(self.height - 1, -1, -1):
            if np.all(self.grid[y] != 0):
                cleared += 1
                self.grid[y : self.height - 1] = self.grid[y + 1 : self.height].copy()
        return cleared

    def filled_cells(self) -> List[Tuple[int, int, TetrominoType]]:
        """Return ``(x, y, shape)`` for every occupied cell in index order."""

        flat = self.grid.ravel()
        cells: List[Tuple[int, int, TetrominoType]] = []
        for index in np.flatnonzero(flat):
            y, x = divmod(int(index), self.width)
            cells.append((x, y, VALUE_PIECES[int(flat[index])]))
        return cells
