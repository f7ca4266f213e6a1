"""ASCII demo for the engine.

Run with: ``python -m blockfall``

Hard-drops a number of random pieces and prints the resulting frame, locked
cells plus the falling piece, followed by the score.  Pass ``--play`` to open
the pygame window instead.
"""

from __future__ import annotations

import argparse
import logging
import random

from . import GameState, Intent, render_grid


def _print_grid(grid: list[list]) -> None:
    for row in grid:
        print("".join(cell.value for cell in row))


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="Seed for the piece generator.")
    parser.add_argument("--drops", type=int, default=0, help="Number of pieces to hard-drop first.")
    parser.add_argument("--play", action="store_true", help="Open the pygame front-end.")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.WARNING), format="%(message)s")

    if args.play:
        from .run_pygame import main as play

        play(seed=args.seed)
        return

    gs = GameState(rng=random.Random(args.seed))
    gs.tick()
    for _ in range(max(0, args.drops)):
        if gs.is_over():
            break
        gs.handle_input(Intent.HARD_DROP)
    _print_grid(render_grid(gs.board, gs.active))
    print(f"Score: {gs.score}{' (game over)' if gs.is_over() else ''}")


if __name__ == "__main__":
    main()
