"""CLI / terminal mode for the Qwirkle engine."""

from __future__ import annotations

import sys
import time
from collections.abc import Sequence
from typing import TextIO

from qwirkle.errors import CommandError, IllegalMoveError
from qwirkle.game import COMPUTER, USER, Game
from qwirkle.move import Move
from qwirkle.render import render_ansi, render_rack, render_text
from qwirkle.tile import Tile

HELP = """\
Commands:
  hX,Y;I,J,...   -- place rack tiles I,J,... left to right from (X,Y)
  vX,Y;I,J,...   -- place rack tiles I,J,... top to bottom from (X,Y)
  rI,J,...       -- return rack tiles I,J,... to the bag and draw new ones
  hint           -- list the engine's best moves for your rack
  help           -- show this text
"""


def _show(game: Game, out: TextIO, ansi: bool) -> None:
    print(
        f"Your score: {game.scores[USER]}    "
        f"Computer score: {game.scores[COMPUTER]}    "
        f"Tiles left: {game.bag.tiles_left()}",
        file=out,
    )
    print(render_ansi(game.board) if ansi else render_text(game.board), file=out)
    print(file=out)
    print(render_rack(game.user_rack.get_tiles(), ansi=ansi), file=out)
    if len(game.computer_rack) < game.computer_rack.capacity:
        print(f"COMPUTER HAS {len(game.computer_rack)} TILES LEFT.", file=out)


def move_command(move: Move, rack: Sequence[Tile]) -> str:
    """The h/v command that plays *move* from *rack*."""
    # Commands lay tiles toward +x / +y, so order the placements that way.
    placements = sorted(move.placements, key=lambda p: (p[1], p[2]))
    indices: list[int] = []
    for tile, _, _ in placements:
        indices.append(next(i for i, t in enumerate(rack) if t == tile and i not in indices))
    _, x, y = placements[0]
    d = "h" if move.horizontal else "v"
    return f"{d}{x},{y};{','.join(str(i) for i in indices)}"


def _show_hint(game: Game, out: TextIO, top_n: int = 5) -> None:
    t0 = time.time()
    moves = game.hints(top_n)
    elapsed = time.time() - t0

    if not moves:
        print(f"  No moves found ({elapsed:.2f}s). Try returning tiles.", file=out)
        return

    rack = game.user_rack.get_tiles()
    print(f"  Found {len(moves)} moves in {elapsed:.2f}s.", file=out)
    print("  " + "=" * 50, file=out)
    print(f"  {'#':>2}  {'Score':>5}  {'Command':<16} Tiles", file=out)
    print("  " + "-" * 50, file=out)
    for i, m in enumerate(moves):
        tiles = " ".join(t.code for t in m.tiles_used)
        print(f"  {i+1:>2}  {m.score:>5}  {move_command(m, rack):<16} {tiles}", file=out)
    print("  " + "=" * 50, file=out)


def user_turn(game: Game, inp: TextIO = sys.stdin, out: TextIO = sys.stdout) -> bool:
    """Prompt until a legal move is played.  False on end of input."""
    while True:
        print("> ", end="", file=out, flush=True)
        line = inp.readline()
        if not line:
            return False
        cmd = line.strip().lower()
        if cmd == "help":
            print(HELP, file=out)
            continue
        if cmd == "hint":
            _show_hint(game, out)
            continue
        try:
            result = game.play_command(line)
        except CommandError as exc:
            print(f"  {exc}", file=out)
            continue
        except IllegalMoveError as exc:
            print(f"INVALID MOVE: {exc}", file=out)
            continue
        if result.action == "place":
            print(f"User Move Score={result.score}", file=out)
        return True


def computer_turn(game: Game, out: TextIO = sys.stdout) -> None:
    result = game.computer_turn()
    if result.action == "place":
        print(f"Computer Move Score={result.score}", file=out)
    else:
        print("OH NO, NO MOVES POSSIBLE!  Exchanging entire rack.", file=out)


def run_cli(
    game: Game,
    inp: TextIO = sys.stdin,
    out: TextIO = sys.stdout,
    ansi: bool = True,
    hint: bool = False,
) -> None:
    """Play a game in the terminal until someone goes out or input ends."""
    print("=" * 60, file=out)
    print("  QWIRKLE ENGINE -- You vs. the computer", file=out)
    print("=" * 60, file=out)
    print(HELP, file=out)

    while not game.over:
        _show(game, out, ansi)
        if hint:
            _show_hint(game, out)
        if not user_turn(game, inp, out):
            break
        if game.over:
            break
        computer_turn(game, out)

    print("*** GAME OVER ****", file=out)
    print(
        f"Your score: {game.scores[USER]}    Computer score: {game.scores[COMPUTER]}",
        file=out,
    )
    print(render_ansi(game.board) if ansi else render_text(game.board), file=out)
    print(file=out)
    print(render_rack(game.user_rack.get_tiles(), ansi=ansi), file=out)
