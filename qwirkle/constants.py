"""Game constants for the Qwirkle engine."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    RED = 0
    CYAN = 1
    YELLOW = 2
    GREEN = 3
    BLUE = 4
    VIOLET = 5


class Shape(IntEnum):
    CIRCLE = 0
    X = 1
    DIAMOND = 2
    SQUARE = 3
    STARBURST = 4
    CROSS = 5


RACK_SIZE = 6
COPIES_PER_TILE = 3  # 6 colors x 6 shapes x 3 = 108 tiles

QWIRKLE_LENGTH = 6   # a run using every value of the varying attribute
QWIRKLE_SCORE = 12   # double the face value of a 6-run
FIRST_MOVE_SCORE = 1  # a lone tile opening the game forms no word
FINISH_BONUS = 6     # awarded to the player who empties their rack

ORIGIN = (0, 0)  # opening square when the board is empty

# Rendering

ANSI_RESET = "\u001b[0m"

ANSI_COLORS: dict[Color, str] = {
    Color.RED:    "\u001b[31m",
    Color.CYAN:   "\u001b[36m",
    Color.YELLOW: "\u001b[33m",
    Color.GREEN:  "\u001b[32m",
    Color.BLUE:   "\u001b[34m",
    Color.VIOLET: "\u001b[35m",
}

SHAPE_GLYPHS: dict[Shape, str] = {
    Shape.CIRCLE:    "●",
    Shape.X:         "✖",
    Shape.DIAMOND:   "◆",
    Shape.SQUARE:    "■",
    Shape.STARBURST: "🟏",
    Shape.CROSS:     "🞧",
}

# Two-letter codes for the plain-text grid: color initial + shape initial.
COLOR_CODES: dict[Color, str] = {
    Color.RED: "R", Color.CYAN: "C", Color.YELLOW: "Y",
    Color.GREEN: "G", Color.BLUE: "B", Color.VIOLET: "V",
}
SHAPE_CODES: dict[Shape, str] = {
    Shape.CIRCLE: "o", Shape.X: "x", Shape.DIAMOND: "d",
    Shape.SQUARE: "s", Shape.STARBURST: "*", Shape.CROSS: "+",
}

# RGB fills for the Pillow snapshot.
RGB_COLORS: dict[Color, tuple[int, int, int]] = {
    Color.RED:    (220, 50, 47),
    Color.CYAN:   (42, 161, 152),
    Color.YELLOW: (230, 190, 40),
    Color.GREEN:  (90, 170, 60),
    Color.BLUE:   (38, 110, 210),
    Color.VIOLET: (150, 80, 190),
}
