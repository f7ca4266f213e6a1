"""Simple pygame front-end for the engine.

The window is only glue: keyboard events are turned into intents, the game
is ticked once per frame and the render query is painted as inset squares.
The board's bottom-up rows are flipped onto the surface's top-down axis.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import pygame

from .board import HEIGHT, WIDTH
from .controls import Intent, intent_for_key
from .game_state import GameState
from .tetromino import TetrominoType, shape_color

LOGGER = logging.getLogger(__name__)

# Size of a single board cell in pixels
UNIT_SIZE = 20
# Frames per second to run the game loop at
FPS = 60
BACKGROUND = (0, 0, 0)


def cell_rect(x: int, y: int) -> pygame.Rect:
    """Return the surface rectangle of board cell ``(x, y)``.

    Cells leave a one pixel border on every side so the background shows
    through as grid lines.
    """

    top = (HEIGHT - y - 1) * UNIT_SIZE
    return pygame.Rect(x * UNIT_SIZE + 1, top + 1, UNIT_SIZE - 2, UNIT_SIZE - 2)


def draw(screen: pygame.Surface, state: GameState) -> None:
    """Paint the locked cells and the falling piece."""

    screen.fill(BACKGROUND)
    for x, y, shape in state.render():
        if shape is TetrominoType.EMPTY:
            continue
        pygame.draw.rect(screen, shape_color(shape), cell_rect(x, y))


def handle_key(event: pygame.event.Event, state: GameState) -> None:
    """Forward a key press to the game as an intent."""

    intent = intent_for_key(pygame.key.name(event.key))
    if intent is Intent.RESET:
        LOGGER.info("Restart requested")
    state.handle_input(intent)


def run(state: Optional[GameState] = None) -> GameState:
    """Run the window until it is closed and return the final state."""

    pygame.init()
    screen = pygame.display.set_mode((WIDTH * UNIT_SIZE, HEIGHT * UNIT_SIZE))
    pygame.display.set_caption("Tetris")
    clock = pygame.time.Clock()
    state = state or GameState()
    LOGGER.info("Game started")

    running = True
    try:
        while running:
            clock.tick(FPS)
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    handle_key(event, state)

            if not state.is_over():
                state.tick()
                pygame.display.set_caption(f"Tetris:{state.score}")
            draw(screen, state)
            pygame.display.flip()
    finally:
        pygame.quit()
    LOGGER.info("Game stopped. Score: %d", state.score)
    return state


def main(seed: Optional[int] = None) -> None:
    run(GameState(rng=random.Random(seed)))


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
