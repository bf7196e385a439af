"""Tile bag for Qwirkle: three copies of each of the 36 color/shape tiles."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable

from qwirkle.constants import COPIES_PER_TILE
from qwirkle.errors import EmptyBagError
from qwirkle.tile import ALL_TILES, Tile

log = logging.getLogger("qwirkle")

TILE_DISTRIBUTION: dict[Tile, int] = {tile: COPIES_PER_TILE for tile in ALL_TILES}


class Bag:
    """Shuffled draw pile.  Uses its own RNG so games are reproducible by seed.

    Starts with the full set unless *tiles* is given.
    """

    def __init__(self, seed: int | None = None, tiles: Iterable[Tile] | None = None):
        self._rng = random.Random(seed)
        if tiles is None:
            self._tiles = [t for t, count in TILE_DISTRIBUTION.items() for _ in range(count)]
        else:
            self._tiles = list(tiles)
        self.shuffle()

    def shuffle(self) -> None:
        self._rng.shuffle(self._tiles)

    def tiles_left(self) -> int:
        return len(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def pick_tile(self) -> Tile:
        """Take the top tile.  Check ``tiles_left()`` first."""
        if not self._tiles:
            raise EmptyBagError("the bag is empty")
        return self._tiles.pop()

    def draw(self, n: int) -> list[Tile]:
        """Up to *n* tiles; fewer once the bag runs dry."""
        drawn: list[Tile] = []
        while len(drawn) < n and self._tiles:
            drawn.append(self.pick_tile())
        if len(drawn) < n:
            log.debug("bag short: wanted %d, drew %d", n, len(drawn))
        return drawn

    def return_tile(self, tile: Tile) -> None:
        self._tiles.append(tile)
        self.shuffle()

    def return_tiles(self, tiles: Iterable[Tile]) -> None:
        for tile in tiles:
            self.return_tile(tile)

    def __repr__(self) -> str:
        return f"Bag({len(self._tiles)} tiles)"
