"""Game session: one human player against the engine."""

from __future__ import annotations

import logging
from typing import NamedTuple

from qwirkle.bag import Bag
from qwirkle.board import Board
from qwirkle.commands import ExchangeCommand, PlaceCommand, parse_command
from qwirkle.constants import FINISH_BONUS, FIRST_MOVE_SCORE
from qwirkle.engine import MoveEngine
from qwirkle.errors import IllegalMoveError
from qwirkle.move import Move
from qwirkle.rack import Rack
from qwirkle.scoring import score_move
from qwirkle.tile import Tile

log = logging.getLogger("qwirkle.game")

USER = "user"
COMPUTER = "computer"


class TurnResult(NamedTuple):
    player: str
    action: str            # "place" or "exchange"
    score: int
    tiles: tuple[Tile, ...]
    move: Move | None = None


class Game:
    """All mutable state of a game: board, bag, racks, scores.

    The human plays first.  A player who empties their rack earns
    FINISH_BONUS and ends the game.
    """

    def __init__(self, seed: int | None = None, engine: MoveEngine | None = None, bag: Bag | None = None):
        self.seed = seed
        self.engine = engine or MoveEngine()
        self.board = Board()
        self.bag = bag if bag is not None else Bag(seed)
        self.racks: dict[str, Rack] = {USER: Rack(self.bag), COMPUTER: Rack(self.bag)}
        self.scores: dict[str, int] = {USER: 0, COMPUTER: 0}
        self.over = False

    @property
    def user_rack(self) -> Rack:
        return self.racks[USER]

    @property
    def computer_rack(self) -> Rack:
        return self.racks[COMPUTER]

    @property
    def first_move(self) -> bool:
        return self.board.is_board_empty()

    # human turn

    def play_command(self, text: str) -> TurnResult:
        """Run one command for the human player.

        Raises CommandError or IllegalMoveError without changing anything.
        """
        self._check_not_over()
        cmd = parse_command(text, len(self.user_rack))
        if isinstance(cmd, ExchangeCommand):
            return self.exchange(cmd.indices)
        return self.place(cmd)

    def place(self, cmd: PlaceCommand) -> TurnResult:
        """Lay the indexed user tiles from (x, y) along the command's axis."""
        rack = self.user_rack
        tiles = [rack[i] for i in cmd.indices]
        dx, dy = (1, 0) if cmd.horizontal else (0, 1)

        new_board = self.board.copy()
        adjacent = False
        positions: list[tuple[int, int]] = []
        x, y = cmd.x, cmd.y
        for tile in tiles:
            # Step over tiles already on the board
            while new_board.is_occupied(x, y):
                x += dx
                y += dy
            if self.board.is_adjacent(x, y):
                adjacent = True
            new_board.insert_tile(tile, x, y)
            positions.append((x, y))

        if not new_board.is_valid_board():
            raise IllegalMoveError("tiles do not form valid lines")
        if not (adjacent or self.first_move):
            raise IllegalMoveError("tiles must touch the tiles already played")

        score = score_move(new_board, positions, cmd.horizontal)
        if score == 0:
            # Only a lone opening tile forms no word
            score = FIRST_MOVE_SCORE

        placements = [(t, px, py) for t, (px, py) in zip(tiles, positions)]
        for tile in tiles:
            rack.remove_tile(tile)
        move = Move(new_board, rack.get_tiles(), score, placements, cmd.horizontal)
        return self._commit(USER, move)

    def exchange(self, indices) -> TurnResult:
        """Swap the indexed user tiles for fresh ones from the bag."""
        if self.first_move:
            raise IllegalMoveError("can't return tiles on the first move")
        rack = self.user_rack
        tiles = [rack[i] for i in indices]
        # Draw before returning so the same tiles don't come straight back.
        for tile in tiles:
            rack.remove_tile(tile)
        rack.populate()
        self.bag.return_tiles(tiles)
        # The bag may have been too short to cover the whole exchange.
        rack.populate()
        log.debug("user exchanged %d tiles", len(tiles))
        return TurnResult(USER, "exchange", 0, tuple(tiles))

    # computer turn

    def computer_turn(self) -> TurnResult:
        self._check_not_over()
        rack = self.computer_rack
        move = self.engine.find_best_move(self.board, rack.get_tiles())
        if move.score > 0:
            return self._commit(COMPUTER, move)

        log.info("No moves possible for the computer, exchanging entire rack.")
        tiles = rack.get_tiles()
        rack.replace([])
        rack.populate()
        self.bag.return_tiles(tiles)
        rack.populate()
        return TurnResult(COMPUTER, "exchange", 0, tiles)

    def hints(self, top_n: int = 5) -> list[Move]:
        """The engine's best moves for the human's rack, best first."""
        return self.engine.find_best_moves(self.board, self.user_rack.get_tiles(), top_n)

    # bookkeeping

    def _check_not_over(self) -> None:
        if self.over:
            raise IllegalMoveError("the game is over")

    def _commit(self, player: str, move: Move) -> TurnResult:
        rack = self.racks[player]
        self.board = move.board
        rack.replace(move.rack)
        rack.populate()
        self.scores[player] += move.score
        log.debug("%s played %r", player, move)

        if len(rack) == 0:
            self.scores[player] += FINISH_BONUS
            self.over = True
            log.info("%s emptied their rack; game over.", player)
        return TurnResult(player, "place", move.score, tuple(move.tiles_used), move)

    def winner(self) -> str | None:
        """Leading player, or None on a tie."""
        if self.scores[USER] == self.scores[COMPUTER]:
            return None
        return max(self.scores, key=self.scores.get)
