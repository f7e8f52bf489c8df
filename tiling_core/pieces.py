from __future__ import annotations

from typing import Dict, List

from .cells import Color, Pos, ShapeError, is_color
from .serial import tile_from_rows
from .tile import Tile

# The twelve pentominoes, each drawn in its own letter.
PENTOMINO_ROWS: Dict[str, List[str]] = {
    'F': [' FF', 'FF ', ' F '],
    'I': ['IIIII'],
    'L': ['LLLL', 'L   '],
    'N': ['NN  ', ' NNN'],
    'P': ['PP', 'PP', 'P '],
    'T': ['TTT', ' T ', ' T '],
    'U': ['U U', 'UUU'],
    'V': ['V  ', 'V  ', 'VVV'],
    'W': ['W  ', 'WW ', ' WW'],
    'X': [' X ', 'XXX', ' X '],
    'Y': ['YYYY', ' Y  '],
    'Z': ['ZZ ', ' Z ', ' ZZ'],
}


def pentomino(name: str) -> Tile:
    """Looks up a pentomino by letter (case-insensitive)."""
    rows = PENTOMINO_ROWS.get(name.upper())
    if rows is None:
        raise ShapeError(f"Unknown pentomino: {name!r}")
    return tile_from_rows(rows)


def pentomino_set() -> Dict[str, Tile]:
    return {name: tile_from_rows(rows) for name, rows in PENTOMINO_ROWS.items()}


def rectangle(width: int, height: int, color: Color = 'a') -> Tile:
    """Solid width x height board of a single color."""
    if not is_color(color):
        raise ShapeError(f"color must be a single non-blank character: {color!r}")
    return Tile({(x, y): color for y in range(height) for x in range(width)})


def checkerboard(width: int, height: int, colors: str = 'ab') -> Tile:
    """Two-colored board; (0, 0) gets colors[0]."""
    if len(colors) != 2 or not all(is_color(c) for c in colors):
        raise ShapeError(f"checkerboard needs two non-blank colors, got {colors!r}")
    squares: Dict[Pos, Color] = {}
    for y in range(height):
        for x in range(width):
            squares[(x, y)] = colors[(x + y) % 2]
    return Tile(squares)
