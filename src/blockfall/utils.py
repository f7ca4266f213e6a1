"""Utility helpers for the engine: gravity timing, placement and rendering."""

from __future__ import annotations

from typing import List, Optional, Tuple

from .board import Board
from .tetromino import Tetromino, TetrominoType


BASE_GRAVITY_MS = 1000

RenderCell = Tuple[int, int, TetrominoType]


def gravity_interval_ms(score: int) -> int:
    """Return the fall interval in milliseconds for ``score``.

    Every point shaves a millisecond off the base interval.  From a score of
    ``BASE_GRAVITY_MS`` upward the interval is ``0`` and the piece falls on
    every tick.
    """

    return max(0, BASE_GRAVITY_MS - score)


def can_place(board: Board, tetromino: Tetromino) -> bool:
    """Return ``True`` if every cell of ``tetromino`` is on the board and empty.

    This is the single validator behind movement, rotation, gravity and spawn.
    """

    for x, y in tetromino.blocks():
        if not board.in_bounds(x, y):
            return False
        if not board.is_empty(x, y):
            return False
    return True


def render_cells(board: Board, active: Optional[Tetromino] = None) -> List[RenderCell]:
    """Return the cells a renderer has to paint.

    The list holds every locked cell followed by the four cells of ``active``
    (unless it is missing or the empty sentinel), each as ``(x, y, shape)``
    with ``y = 0`` on the floor.  Neither argument is modified.
    """

    cells = board.filled_cells()
    if active is not None and not active.is_empty:
        cells.extend((x, y, active.shape) for x, y in active.blocks())
    return cells


def render_grid(board: Board, active: Optional[Tetromino] = None) -> List[List[TetrominoType]]:
    """Return the board with the active piece overlaid, top row first.

    Convenient for text output, where the first printed line is the top of
    the well.
    """

    grid = [[TetrominoType.EMPTY] * board.width for _ in range(board.height)]
    for x, y, shape in render_cells(board, active):
        if board.in_bounds(x, y):
            grid[board.height - 1 - y][x] = shape
    return grid
