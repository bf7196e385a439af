"""Tile value type."""

from __future__ import annotations

from qwirkle.constants import (
    ANSI_COLORS, ANSI_RESET, COLOR_CODES, SHAPE_CODES, SHAPE_GLYPHS, Color, Shape,
)


class Tile:
    """A colored shape.  Immutable and compared by value."""

    __slots__ = ("color", "shape")

    def __init__(self, color: Color, shape: Shape):
        object.__setattr__(self, "color", Color(color))
        object.__setattr__(self, "shape", Shape(shape))

    def __setattr__(self, name, value):
        raise AttributeError("Tile is immutable")

    @classmethod
    def parse(cls, text: str) -> Tile:
        """Build a tile from ``"<color>-<shape>"``, e.g. ``"red-circle"``."""
        try:
            color, shape = text.strip().lower().split("-", 1)
            return cls(Color[color.upper()], Shape[shape.upper()])
        except (KeyError, ValueError):
            raise ValueError(f"not a tile: {text!r}") from None

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.color == other.color and self.shape == other.shape

    def __hash__(self) -> int:
        return hash((self.color, self.shape))

    def __lt__(self, other: Tile) -> bool:
        return (self.color, self.shape) < (other.color, other.shape)

    def __reduce__(self):
        return (Tile, (int(self.color), int(self.shape)))

    @property
    def code(self) -> str:
        """Two-character code used in the plain-text grid."""
        return COLOR_CODES[self.color] + SHAPE_CODES[self.shape]

    @property
    def glyph(self) -> str:
        """Shape glyph wrapped in the tile's ANSI color."""
        return f"{ANSI_COLORS[self.color]}{SHAPE_GLYPHS[self.shape]}{ANSI_RESET}"

    def __str__(self) -> str:
        return f"{self.color.name.lower()}-{self.shape.name.lower()}"

    def __repr__(self) -> str:
        return f"Tile({self})"


ALL_TILES: tuple[Tile, ...] = tuple(Tile(c, s) for c in Color for s in Shape)
