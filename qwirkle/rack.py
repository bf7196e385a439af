"""A player's rack."""

from __future__ import annotations

from collections.abc import Iterable

from qwirkle.bag import Bag
from qwirkle.constants import RACK_SIZE
from qwirkle.errors import TileNotInRackError
from qwirkle.tile import Tile


class Rack:
    """Tiles held by one player, refilled from a shared bag."""

    def __init__(self, bag: Bag, size: int = RACK_SIZE, tiles: Iterable[Tile] = ()):
        self.bag = bag
        self.capacity = size
        self._tiles: list[Tile] = list(tiles)
        self.populate()

    def populate(self) -> None:
        """Draw until the rack is full or the bag is empty."""
        self._tiles.extend(self.bag.draw(self.capacity - len(self._tiles)))

    def get_tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles)

    def size(self) -> int:
        return len(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __getitem__(self, index: int) -> Tile:
        return self._tiles[index]

    def __iter__(self):
        return iter(self._tiles)

    def remove_tile(self, tile: Tile) -> None:
        """Remove one instance of *tile*."""
        try:
            self._tiles.remove(tile)
        except ValueError:
            raise TileNotInRackError(f"{tile} is not on the rack") from None

    def replace(self, tiles: Iterable[Tile]) -> None:
        """Set the held tiles, e.g. to the rack a Move leaves behind."""
        self._tiles = list(tiles)

    def __repr__(self) -> str:
        return f"Rack({' '.join(t.code for t in self._tiles)})"
