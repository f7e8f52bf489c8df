from __future__ import annotations

from typing import Dict, Mapping, Tuple

from .cells import BLANK, Color, Pos


def strip_blanks(raw: Mapping[Pos, Color]) -> Dict[Pos, Color]:
    """Drops every entry whose color is BLANK."""
    return {pos: color for pos, color in raw.items() if color != BLANK}


def min_corner(squares: Mapping[Pos, Color]) -> Pos:
    """Smallest x and smallest y among the keys, (0, 0) for an empty mapping."""
    if not squares:
        return (0, 0)
    return (min(x for x, _ in squares), min(y for _, y in squares))


def shift_squares(squares: Mapping[Pos, Color], dx: int, dy: int) -> Dict[Pos, Color]:
    """Translates every key by (dx, dy)."""
    return {(x + dx, y + dy): color for (x, y), color in squares.items()}


def normalize(raw: Mapping[Pos, Color], pad: bool = False) -> Dict[Pos, Color]:
    """Canonical form of a raw position -> color mapping.

    Blank entries are always removed. Unless `pad` is set the result is then
    re-anchored so its minimum x and minimum y are both 0; with `pad` the
    coordinates stay in the caller's frame (needed when the result must line
    up with a board's absolute positions).
    """
    squares = strip_blanks(raw)
    if pad:
        return squares
    min_x, min_y = min_corner(squares)
    if min_x == 0 and min_y == 0:
        return squares
    return shift_squares(squares, -min_x, -min_y)


def extent(squares: Mapping[Pos, Color]) -> Tuple[int, int]:
    """(width, height) measured from the origin: 1 + max coordinate, never below 0."""
    if not squares:
        return (0, 0)
    return (max(0, max(x for x, _ in squares) + 1), max(0, max(y for _, y in squares) + 1))
