"""Rule engine and render projection for a falling-block puzzle game."""

from .board import Board
from .controls import Intent, intent_for_key
from .tetromino import PLAYABLE_TYPES, Tetromino, TetrominoType, shape_blocks, shape_color
from .game_state import GameState
from .utils import can_place, gravity_interval_ms, render_cells, render_grid

__all__ = [
    "Board",
    "Tetromino",
    "TetrominoType",
    "PLAYABLE_TYPES",
    "GameState",
    "Intent",
    "intent_for_key",
    "can_place",
    "gravity_interval_ms",
    "render_cells",
    "render_grid",
    "shape_blocks",
    "shape_color",
]
