"""Text, ANSI and image renderings of the board and racks."""

from __future__ import annotations

import math
from collections.abc import Sequence

from PIL import Image, ImageDraw

from qwirkle.board import Board
from qwirkle.constants import RGB_COLORS, Shape
from qwirkle.tile import Tile

_EMPTY = "--"


def _grid(board: Board, cell) -> str:
    header = "    " + "".join(f" {x:>3}" for x in range(board.min_x, board.max_x))
    lines = [header]
    for y in range(board.min_y, board.max_y):
        parts = [f"{y:>3}:"]
        for x in range(board.min_x, board.max_x):
            tile = board.get(x, y)
            parts.append("  " + (cell(tile) if tile is not None else _EMPTY))
        lines.append("".join(parts))
    return "\n".join(lines)


def render_text(board: Board) -> str:
    """Grid with coordinate headers; tiles as two-letter codes (``Ro``)."""
    return _grid(board, lambda t: t.code)


def render_ansi(board: Board) -> str:
    """Grid with coordinate headers; tiles as colored glyphs."""
    return _grid(board, lambda t: t.glyph + " ")


def render_rack(tiles: Sequence[Tile], ansi: bool = True) -> str:
    """Rack tiles with their command indices underneath."""
    top = "".join(f" {t.glyph + ' ' if ansi else t.code}" for t in tiles)
    bottom = "".join(f"{i:>2} " for i in range(len(tiles)))
    return f"{top}\n{bottom}"


# image snapshot

_BG = (26, 26, 46)
_TILE_BG = (20, 20, 20)
_GRID = (60, 60, 90)


def _draw_shape(draw: ImageDraw.ImageDraw, shape: Shape, box, fill) -> None:
    x0, y0, x1, y1 = box
    cx, cy = (x0 + x1) / 2, (y0 + y1) / 2
    r = (x1 - x0) / 2
    w = max(2, int(r / 3))
    if shape is Shape.CIRCLE:
        draw.ellipse(box, fill=fill)
    elif shape is Shape.SQUARE:
        draw.rectangle(box, fill=fill)
    elif shape is Shape.DIAMOND:
        draw.polygon([(cx, y0), (x1, cy), (cx, y1), (x0, cy)], fill=fill)
    elif shape is Shape.X:
        draw.line([(x0, y0), (x1, y1)], fill=fill, width=w)
        draw.line([(x0, y1), (x1, y0)], fill=fill, width=w)
    elif shape is Shape.CROSS:
        draw.line([(cx, y0), (cx, y1)], fill=fill, width=w)
        draw.line([(x0, cy), (x1, cy)], fill=fill, width=w)
    else:
        # Starburst: eight-pointed star
        points = []
        for i in range(16):
            rad = r if i % 2 == 0 else r * 0.45
            dx, dy = _STAR_UNIT[i]
            points.append((cx + dx * rad, cy + dy * rad))
        draw.polygon(points, fill=fill)


_STAR_UNIT = [
    (math.sin(math.pi * i / 8), -math.cos(math.pi * i / 8)) for i in range(16)
]


def render_image(board: Board, cell: int = 40) -> Image.Image:
    """Pillow image of the board, one *cell*-pixel square per grid cell.

    An empty board renders as a single empty cell.
    """
    cols = max(1, board.max_x - board.min_x)
    rows = max(1, board.max_y - board.min_y)
    img = Image.new("RGB", (cols * cell + 1, rows * cell + 1), _BG)
    draw = ImageDraw.Draw(img)
    pad = max(2, cell // 6)

    for row in range(rows):
        for col in range(cols):
            x0, y0 = col * cell, row * cell
            draw.rectangle([x0, y0, x0 + cell, y0 + cell], outline=_GRID)
            tile = board.get(board.min_x + col, board.min_y + row)
            if tile is None:
                continue
            draw.rectangle([x0 + 1, y0 + 1, x0 + cell - 1, y0 + cell - 1], fill=_TILE_BG)
            _draw_shape(
                draw, tile.shape,
                (x0 + pad, y0 + pad, x0 + cell - pad, y0 + cell - pad),
                RGB_COLORS[tile.color],
            )
    return img


def save_snapshot(board: Board, path: str, cell: int = 40) -> None:
    """Write a PNG snapshot of the board."""
    render_image(board, cell).save(path, format="PNG")
