from __future__ import annotations

from typing import Dict, Mapping

from .cells import Color, Pos

# Named transforms a Tile exposes, in the order the full group lists them.
TRANSFORM_NAMES = (
    'reflect_lr',
    'reflect_ud',
    'reflect_prim',
    'reflect_off',
    'rotate_about',
    'rotate_left',
    'rotate_right',
)


def reflect_lr(squares: Mapping[Pos, Color], width: int, height: int) -> Dict[Pos, Color]:
    """Mirror across the vertical axis: (x, y) -> (width - 1 - x, y)."""
    return {(width - 1 - x, y): color for (x, y), color in squares.items()}


def reflect_ud(squares: Mapping[Pos, Color], width: int, height: int) -> Dict[Pos, Color]:
    """Mirror across the horizontal axis: (x, y) -> (x, height - 1 - y)."""
    return {(x, height - 1 - y): color for (x, y), color in squares.items()}


def reflect_prim(squares: Mapping[Pos, Color], width: int, height: int) -> Dict[Pos, Color]:
    """Transpose across the main diagonal: (x, y) -> (y, x)."""
    return {(y, x): color for (x, y), color in squares.items()}
