"""Exceptions raised by the Qwirkle engine."""

from __future__ import annotations


class QwirkleError(Exception):
    """Base class for every error raised by this package."""


class PreconditionViolation(QwirkleError, AssertionError):
    """A caller read a cell without checking ``is_empty`` first."""


class OccupiedCellError(QwirkleError):
    """A tile was inserted on top of another tile."""

    def __init__(self, x: int, y: int):
        super().__init__(f"cell ({x},{y}) is already occupied")
        self.x = x
        self.y = y


class IllegalMoveError(QwirkleError):
    """A placement breaks a word or does not touch the existing tiles."""


class EmptyBagError(QwirkleError):
    """Tried to draw from a bag with no tiles left."""


class TileNotInRackError(QwirkleError):
    """Tried to remove a tile the rack does not hold."""


class CommandError(QwirkleError, ValueError):
    """Malformed or out-of-range command text."""
