"""Move engine: exhaustive anchor-based search over the rack."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from qwirkle.board import Board
from qwirkle.constants import FIRST_MOVE_SCORE, ORIGIN
from qwirkle.move import Move
from qwirkle.scoring import score_move
from qwirkle.tile import Tile

log = logging.getLogger("qwirkle.engine")

# Extension order: right, left, down, up.
DIRECTIONS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _without(rack: tuple[Tile, ...], tile: Tile) -> tuple[Tile, ...]:
    """Rack minus one instance of *tile*."""
    i = rack.index(tile)
    return rack[:i] + rack[i + 1:]


class MoveEngine:
    """Finds the highest-scoring placement for a rack.

    Every empty square touching the board (the board's extent plus a one-cell
    border) is tried as an anchor.  Each legal tile at the anchor is then
    extended in a straight line in each of the four directions, one rack tile
    at a time, for as long as the board stays valid.  Branches work on their
    own board copies, so a dead end is simply dropped.
    """

    def __init__(self):
        self.nodes = 0  # legality checks made by the last search

    # public API

    def find_best_move(self, board: Board, rack: Sequence[Tile]) -> Move:
        """Best move for *rack*, or a zero-score pass if nothing is legal.

        Ties go to the first candidate found (anchors column by column, then
        rack order, then right/left/down/up).
        """
        rack = tuple(rack)
        best = Move(board.copy(), rack)
        count = 0
        for move in self._generate_moves(board, rack):
            count += 1
            if move.score > best.score:
                best = move
        log.debug(
            "search: %d nodes, %d candidates, best=%r",
            self.nodes, count, best,
        )
        return best

    def find_best_moves(self, board: Board, rack: Sequence[Tile], top_n: int = 10) -> list[Move]:
        """Top N distinct scoring moves, best first."""
        seen: set[frozenset[tuple[Tile, int, int]]] = set()
        unique: list[Move] = []
        for m in self._generate_moves(board, tuple(rack)):
            key = m.key()
            if m.score > 0 and key not in seen:
                seen.add(key)
                unique.append(m)
        unique.sort(key=lambda m: m.score, reverse=True)
        return unique[:top_n]

    # move generation

    def _anchors(self, board: Board) -> Iterator[tuple[int, int]]:
        if board.is_board_empty():
            yield ORIGIN
            return
        for x in range(board.min_x - 1, board.max_x + 1):
            for y in range(board.min_y - 1, board.max_y + 1):
                if board.is_adjacent(x, y):
                    yield x, y

    def _generate_moves(self, board: Board, rack: tuple[Tile, ...]) -> Iterator[Move]:
        self.nodes = 0
        opening = board.is_board_empty()
        for x, y in self._anchors(board):
            yield from self._moves_at_anchor(board, rack, x, y, opening)

    def _moves_at_anchor(
        self,
        board: Board,
        rack: tuple[Tile, ...],
        x: int,
        y: int,
        opening: bool,
    ) -> Iterator[Move]:
        """Every move that starts by placing a rack tile on (x, y)."""
        # Identical tiles lead to identical branches; try each value once.
        for tile in dict.fromkeys(rack):
            new_board = board.copy()
            new_board.insert_tile(tile, x, y)
            self.nodes += 1
            if not new_board.is_valid_board():
                continue

            new_rack = _without(rack, tile)
            placed = [(tile, x, y)]
            score = score_move(new_board, [(x, y)], True)
            if score == 0 and opening:
                score = FIRST_MOVE_SCORE
            yield Move(new_board, new_rack, score, placed, True)

            for dx, dy in DIRECTIONS:
                yield from self._extend(new_board, new_rack, x, y, placed, dx, dy)

    def _extend(
        self,
        board: Board,
        rack: tuple[Tile, ...],
        x: int,
        y: int,
        placed: list[tuple[Tile, int, int]],
        dx: int,
        dy: int,
    ) -> Iterator[Move]:
        """Grow the line through (x, y) by one more rack tile along (dx, dy)."""
        while board.is_occupied(x, y):
            x += dx
            y += dy

        horizontal = dx != 0
        for tile in dict.fromkeys(rack):
            new_board = board.copy()
            new_board.insert_tile(tile, x, y)
            self.nodes += 1
            if not new_board.is_valid_board():
                continue

            new_rack = _without(rack, tile)
            new_placed = placed + [(tile, x, y)]
            score = score_move(new_board, [(px, py) for _, px, py in new_placed], horizontal)
            yield Move(new_board, new_rack, score, new_placed, horizontal)
            yield from self._extend(new_board, new_rack, x, y, new_placed, dx, dy)
