"""Move scoring."""

from __future__ import annotations

from collections.abc import Sequence

from qwirkle.board import Board
from qwirkle.constants import QWIRKLE_LENGTH, QWIRKLE_SCORE


def score_word(board: Board, x: int, y: int, horizontal: bool) -> int:
    """Score the word running through (x, y) along one axis.

    A Qwirkle (6 tiles) is worth double; anything else is worth its length.
    """
    dx, dy = (1, 0) if horizontal else (0, 1)

    # Rewind to the start of the word
    while board.is_occupied(x - dx, y - dy):
        x -= dx
        y -= dy

    length = 0
    while board.is_occupied(x, y):
        length += 1
        x += dx
        y += dy

    return QWIRKLE_SCORE if length == QWIRKLE_LENGTH else length


def score_move(
    board: Board,
    placed: Sequence[tuple[int, int]],
    horizontal: bool,
) -> int:
    """Score a set of freshly placed cells on the board that already holds them.

    *horizontal* is the axis the placed tiles share (irrelevant for a single
    tile).  Words of a single tile are not counted, so a lone tile on an
    empty board scores 0; the caller credits the opening move.
    """
    if not placed:
        return 0

    score = 0

    # The primary word can be measured from any placed tile.
    x0, y0 = placed[0]
    primary = score_word(board, x0, y0, horizontal)
    if primary > 1:
        score += primary

    for x, y in placed:
        secondary = score_word(board, x, y, not horizontal)
        if secondary > 1:
            score += secondary

    return score
