"""Parser for the player's turn commands.

Command syntax:

* ``h`` or ``v`` (place horizontally / vertically) or ``r`` (return tiles)
* ``X,Y;`` starting square, only for ``h`` and ``v``
* ``i,j,k,...`` rack indices

Examples::

    h5,5;3,5,2,1   place tiles 3, 5, 2 and 1 starting horizontally at 5,5
    r1,2,3         return tiles 1, 2 and 3 and draw new ones
"""

from __future__ import annotations

from typing import NamedTuple, Union

from qwirkle.errors import CommandError


class PlaceCommand(NamedTuple):
    x: int
    y: int
    horizontal: bool
    indices: tuple[int, ...]


class ExchangeCommand(NamedTuple):
    indices: tuple[int, ...]


Command = Union[PlaceCommand, ExchangeCommand]


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise CommandError(f"Invalid {what}: {text!r}") from None


def _parse_indices(text: str, rack_size: int) -> tuple[int, ...]:
    if not text.strip():
        raise CommandError("No tiles given")
    indices: list[int] = []
    for part in text.split(","):
        i = _parse_int(part, "tile number")
        if not 0 <= i < rack_size:
            raise CommandError(f"Invalid tile number {i}")
        if i in indices:
            raise CommandError(f"Tile number {i} given twice")
        indices.append(i)
    return tuple(indices)


def parse_command(text: str, rack_size: int) -> Command:
    """Parse one command line.  Raises CommandError with a diagnostic."""
    cmd = text.strip()
    if not cmd:
        raise CommandError("Empty command")

    directive, rest = cmd[0].lower(), cmd[1:]
    if directive not in ("h", "v", "r"):
        raise CommandError("Missing h, v or r")

    if directive == "r":
        return ExchangeCommand(_parse_indices(rest, rack_size))

    square, sep, tiles = rest.partition(";")
    if not sep:
        raise CommandError("No semicolon found")
    xs, comma, ys = square.partition(",")
    if not comma:
        raise CommandError("No first comma found")

    return PlaceCommand(
        x=_parse_int(xs, "x coordinate"),
        y=_parse_int(ys, "y coordinate"),
        horizontal=directive == "h",
        indices=_parse_indices(tiles, rack_size),
    )
