"""High level game state container and transition API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional
import logging
import random
import time

from .board import Board
from .controls import Intent
from .tetromino import PLAYABLE_TYPES, Tetromino, TetrominoType
from .utils import RenderCell, can_place, gravity_interval_ms, render_cells


LOGGER = logging.getLogger(__name__)


def monotonic_ms() -> float:
    """Return a monotonic timestamp in milliseconds."""

    return time.monotonic() * 1000.0


@dataclass
class GameState:
    """Mutable state for a game session.

    ``rng`` is any object with a ``choice(sequence)`` method and ``clock`` any
    zero-argument callable returning milliseconds; both exist so callers can
    make spawns and gravity deterministic.

    Illegal moves are not errors: every transition reports success as a
    boolean and leaves the state untouched when it fails.  Once a spawn is
    blocked the game is stopped and only :meth:`reset` has any effect.
    """

    rng: Any = field(default_factory=random.Random)
    clock: Callable[[], float] = monotonic_ms
    board: Board = field(default_factory=Board)
    active: Tetromino = field(default_factory=Tetromino.empty)
    score: int = 0
    stopped: bool = False
    last_drop_ms: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.last_drop_ms = self.clock()

    # Queries ----------------------------------------------------------
    def is_over(self) -> bool:
        return self.stopped

    def render(self) -> List[RenderCell]:
        """Return ``(x, y, shape)`` for every locked cell and the active piece."""

        return render_cells(self.board, self.active)

    # Transitions ------------------------------------------------------
    def reset(self) -> None:
        """Return to the freshly constructed state and restart the timer."""

        self.board = Board()
        self.active = Tetromino.empty()
        self.stopped = False
        self.score = 0
        self.last_drop_ms = self.clock()
        LOGGER.info("Game reset")

    def spawn(self) -> bool:
        """Place a new random piece at the top of the board.

        A blocked spawn stops the game and returns ``False``.
        """

        shape: TetrominoType = self.rng.choice(PLAYABLE_TYPES)
        if self.try_move(Tetromino.spawn(shape, self.board.width, self.board.height)):
            LOGGER.debug("Spawned %s at %s", shape.value, self.active.position)
            return True
        self.stopped = True
        LOGGER.info("Game over. Score: %d", self.score)
        return False

    def try_move(self, candidate: Tetromino) -> bool:
        """Make ``candidate`` the active piece if all its cells are free."""

        if not can_place(self.board, candidate):
            return False
        self.active = candidate
        return True

    def move_left(self) -> bool:
        return self.try_move(self.active.moved(-1, 0))

    def move_right(self) -> bool:
        return self.try_move(self.active.moved(1, 0))

    def soft_drop(self) -> bool:
        return self.try_move(self.active.moved(0, -1))

    def rotate_cw(self) -> bool:
        return self.try_move(self.active.rotated_cw())

    def rotate_ccw(self) -> bool:
        return self.try_move(self.active.rotated_ccw())

    def drop_step(self) -> None:
        """Move the active piece down one row, locking it if it cannot fall."""

        if not self.soft_drop():
            self.lock_in()

    def hard_drop(self) -> None:
        """Drop the active piece as far as it goes and lock it."""

        while self.active.position[1] > 0:
            if not self.soft_drop():
                break
        self.lock_in()

    def lock_in(self) -> None:
        """Commit the active piece to the board, clear lines and respawn."""

        if self.active.is_empty:
            return
        self.board.lock_piece(self.active)
        LOGGER.debug("Locked %s at %s", self.active.shape.value, self.active.position)
        self.clear_lines()
        if self.active.is_empty:
            self.spawn()

    def clear_lines(self) -> int:
        """Remove complete rows and add the square of their count to the score."""

        cleared = self.board.clear_full_rows()
        self.score += cleared * cleared
        if cleared:
            LOGGER.debug("Cleared %d row(s). Score: %d", cleared, self.score)
        self.active = Tetromino.empty()
        return cleared

    def tick(self, now: Optional[float] = None) -> None:
        """Advance gravity to ``now`` (milliseconds, defaults to the clock).

        Spawns a piece when none is falling.  Otherwise the piece steps down
        once the time since the last step exceeds the score based interval.
        """

        if self.stopped:
            return
        if now is None:
            now = self.clock()
        if self.active.is_empty:
            self.spawn()
        elif now - self.last_drop_ms > gravity_interval_ms(self.score):
            self.drop_step()
            self.last_drop_ms = now

    def handle_input(self, intent: Intent) -> None:
        """Apply a player intent.

        ``Intent.RESET`` always restarts the game.  Every other intent is
        ignored while the game is stopped or no piece is falling.
        """

        if intent is Intent.RESET:
            self.reset()
            return
        if self.stopped or self.active.is_empty:
            return
        if intent is Intent.MOVE_LEFT:
            self.move_left()
        elif intent is Intent.MOVE_RIGHT:
            self.move_right()
        elif intent is Intent.ROTATE_CW:
            self.rotate_cw()
        elif intent is Intent.ROTATE_CCW:
            self.rotate_ccw()
        elif intent is Intent.HARD_DROP:
            self.hard_drop()
        else:
            self.drop_step()
