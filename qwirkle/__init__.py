"""Qwirkle Engine — modular package."""

from qwirkle.constants import (
    Color, Shape, RACK_SIZE, QWIRKLE_LENGTH, QWIRKLE_SCORE, FIRST_MOVE_SCORE, FINISH_BONUS,
)
from qwirkle.errors import (
    QwirkleError, PreconditionViolation, OccupiedCellError, IllegalMoveError,
    EmptyBagError, TileNotInRackError, CommandError,
)
from qwirkle.tile import Tile, ALL_TILES
from qwirkle.board import Board, is_valid_word
from qwirkle.scoring import score_move, score_word
from qwirkle.move import Move
from qwirkle.engine import MoveEngine
from qwirkle.bag import Bag, TILE_DISTRIBUTION
from qwirkle.rack import Rack
from qwirkle.commands import ExchangeCommand, PlaceCommand, parse_command
from qwirkle.game import Game, TurnResult

__all__ = [
    "ALL_TILES",
    "Bag",
    "Board",
    "Color",
    "CommandError",
    "EmptyBagError",
    "ExchangeCommand",
    "FINISH_BONUS",
    "FIRST_MOVE_SCORE",
    "Game",
    "IllegalMoveError",
    "Move",
    "MoveEngine",
    "OccupiedCellError",
    "PlaceCommand",
    "PreconditionViolation",
    "QWIRKLE_LENGTH",
    "QWIRKLE_SCORE",
    "QwirkleError",
    "RACK_SIZE",
    "Rack",
    "Shape",
    "TILE_DISTRIBUTION",
    "Tile",
    "TileNotInRackError",
    "TurnResult",
    "is_valid_word",
    "parse_command",
    "score_move",
    "score_word",
]
