#!/usr/bin/env python3
"""
Qwirkle Engine

Play Qwirkle in the terminal against an exhaustive-search computer
opponent.  The engine tries every anchor square next to the board and
every straight-line extension of the rack to find the highest-scoring
placement.

Requires: pip install Pillow  (only for --snapshot)
"""

from __future__ import annotations

import argparse
import logging

from qwirkle.cli import run_cli
from qwirkle.game import Game
from qwirkle.render import save_snapshot

# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("qwirkle")


# Entry point

def main() -> None:
    parser = argparse.ArgumentParser(
        description="Qwirkle Engine -- play against the best-move finder",
    )
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the tile bag shuffle")
    parser.add_argument("--plain", action="store_true",
                        help="Plain text board (no ANSI colors)")
    parser.add_argument("--hint", action="store_true",
                        help="Show the engine's best move for your rack every turn")
    parser.add_argument("--snapshot", type=str, default=None,
                        help="Save a PNG of the final board to this path")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    game = Game(seed=args.seed)
    log.debug("new game, seed=%s", args.seed)
    run_cli(game, ansi=not args.plain, hint=args.hint)

    if args.snapshot:
        save_snapshot(game.board, args.snapshot)
        log.info("Board snapshot written to %s", args.snapshot)


if __name__ == "__main__":
    main()
