"""Unbounded Qwirkle game board."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from qwirkle.errors import OccupiedCellError, PreconditionViolation
from qwirkle.tile import Tile

_NEIGHBOURS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def is_valid_word(word: Sequence[Tile]) -> bool:
    """True if a run of tiles may stand on the board.

    All tiles must share a color or a shape, and along the shared attribute
    the other one may not repeat.  A lone tile is always valid.
    """
    if len(word) < 2:
        return True
    colors = {t.color for t in word}
    shapes = {t.shape for t in word}
    const_color = len(colors) == 1
    const_shape = len(shapes) == 1
    if const_color and len(shapes) != len(word):
        return False
    if const_shape and len(colors) != len(word):
        return False
    return const_color or const_shape


class Board:
    """Sparse grid indexed by arbitrary (x, y) integers.

    Cells are either a Tile or empty (no key).  Bounds are half-open,
    ``[min_x, max_x) x [min_y, max_y)``, and only ever grow.
    """

    __slots__ = ("cells", "min_x", "max_x", "min_y", "max_y")

    def __init__(self):
        self.cells: dict[tuple[int, int], Tile] = {}
        self.min_x = 0
        self.max_x = 0
        self.min_y = 0
        self.max_y = 0

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """``(min_x, max_x, min_y, max_y)``."""
        return self.min_x, self.max_x, self.min_y, self.max_y

    # cell access

    def insert_tile(self, tile: Tile, x: int, y: int) -> None:
        """Place *tile* at (x, y), growing the bounds to cover it."""
        if (x, y) in self.cells:
            raise OccupiedCellError(x, y)
        self._resize_to_include(x, y)
        self.cells[(x, y)] = tile

    def get(self, x: int, y: int) -> Tile | None:
        """Tile at (x, y), or None."""
        return self.cells.get((x, y))

    def get_tile(self, x: int, y: int) -> Tile:
        tile = self.cells.get((x, y))
        if tile is None:
            raise PreconditionViolation(f"no tile at ({x},{y})")
        return tile

    def is_empty(self, x: int, y: int) -> bool:
        """True if no tile at (x, y); always true outside the bounds."""
        return (x, y) not in self.cells

    def is_occupied(self, x: int, y: int) -> bool:
        return (x, y) in self.cells

    def is_adjacent(self, x: int, y: int) -> bool:
        """True if (x, y) is empty and touches a tile orthogonally."""
        return self.is_empty(x, y) and any(
            (x + dx, y + dy) in self.cells for dx, dy in _NEIGHBOURS
        )

    def is_board_empty(self) -> bool:
        return not self.cells

    def count_tiles(self) -> int:
        return len(self.cells)

    # legality

    def words(self) -> Iterator[tuple[int, int, bool, list[Tile]]]:
        """Every maximal run of tiles, rows first, then columns.

        Yields ``(x, y, horizontal, tiles)`` where (x, y) is the first cell
        of the run.
        """
        for y in range(self.min_y, self.max_y):
            word: list[Tile] = []
            for x in range(self.min_x, self.max_x + 1):
                tile = self.cells.get((x, y))
                if tile is not None:
                    word.append(tile)
                elif word:
                    yield x - len(word), y, True, word
                    word = []
        for x in range(self.min_x, self.max_x):
            word = []
            for y in range(self.min_y, self.max_y + 1):
                tile = self.cells.get((x, y))
                if tile is not None:
                    word.append(tile)
                elif word:
                    yield x, y - len(word), False, word
                    word = []

    def is_valid_board(self) -> bool:
        """True if every row and column run on the whole board is a valid word."""
        return all(is_valid_word(word) for _, _, _, word in self.words())

    # copying / iteration

    def copy(self) -> Board:
        """Independent copy; tiles are immutable so the dict copy is enough."""
        b = Board()
        b.cells = dict(self.cells)
        b.min_x, b.max_x, b.min_y, b.max_y = self.bounds
        return b

    def __len__(self) -> int:
        return len(self.cells)

    def __contains__(self, pos) -> bool:
        return pos in self.cells

    def __iter__(self) -> Iterator[tuple[int, int, Tile]]:
        for (x, y), tile in sorted(self.cells.items(), key=lambda kv: (kv[0][1], kv[0][0])):
            yield x, y, tile

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells and self.bounds == other.bounds

    __hash__ = None

    def __repr__(self) -> str:
        return f"Board({len(self.cells)} tiles, bounds={self.bounds})"

    def __str__(self) -> str:
        from qwirkle.render import render_text

        return render_text(self)

    def print(self) -> None:
        """Write the colored grid to stdout."""
        from qwirkle.render import render_ansi

        print(render_ansi(self))

    def _resize_to_include(self, x: int, y: int) -> None:
        if not self.cells:
            # First tile
            self.min_x, self.max_x = x, x + 1
            self.min_y, self.max_y = y, y + 1
            return
        self.min_x = min(self.min_x, x)
        self.max_x = max(self.max_x, x + 1)
        self.min_y = min(self.min_y, y)
        self.max_y = max(self.max_y, y + 1)
