"""Shared test fixtures for the Qwirkle engine tests."""

import pytest

from qwirkle.bag import Bag
from qwirkle.board import Board
from qwirkle.tile import Tile


def T(text):
    """Shorthand: T("red-circle")."""
    return Tile.parse(text)


def make_board(placements):
    """Board from {(x, y): "color-shape"}."""
    board = Board()
    for (x, y), text in placements.items():
        board.insert_tile(T(text), x, y)
    return board


@pytest.fixture
def board():
    return Board()


@pytest.fixture
def empty_bag():
    """A bag with no tiles, so racks keep exactly what a test gives them."""
    return Bag(seed=0, tiles=[])
