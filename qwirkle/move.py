"""Move representation for the Qwirkle engine."""

from __future__ import annotations

from qwirkle.board import Board
from qwirkle.tile import Tile


class Move:
    """A scored placement, carrying the board and rack it leads to."""

    __slots__ = ("board", "rack", "score", "placements", "horizontal")

    def __init__(
        self,
        board: Board,
        rack: tuple[Tile, ...],
        score: int = 0,
        placements: list[tuple[Tile, int, int]] | None = None,
        horizontal: bool = True,
    ):
        self.board = board            # board after the move
        self.rack = tuple(rack)       # tiles left on the rack
        self.score = score
        self.placements = placements or []  # [(tile, x, y), ...]
        self.horizontal = horizontal

    @property
    def is_pass(self) -> bool:
        """True for the no-legal-move result: nothing placed, nothing scored."""
        return not self.placements

    @property
    def positions(self) -> list[tuple[int, int]]:
        return [(x, y) for _, x, y in self.placements]

    @property
    def tiles_used(self) -> list[Tile]:
        return [tile for tile, _, _ in self.placements]

    def key(self) -> frozenset[tuple[Tile, int, int]]:
        """Identity of the placement regardless of the order tiles were laid."""
        return frozenset(self.placements)

    def __repr__(self) -> str:
        if self.is_pass:
            return "Move(pass)"
        arrow = "→" if self.horizontal else "↓"
        tiles = " ".join(f"{t.code}@({x},{y})" for t, x, y in self.placements)
        return f"{tiles} {arrow} = {self.score} pts"
