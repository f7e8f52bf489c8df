from __future__ import annotations

from typing import Tuple

Color = str  # a single character, e.g. 'a', 'b', 'X'
Pos = Tuple[int, int]  # (x, y) == (column, row)

# Reserved color meaning "no cell here". Never stored in a Tile.
BLANK: Color = ' '


class ShapeError(ValueError):
    """Raised when tile data coming from outside the core cannot be used."""


def is_color(value: object) -> bool:
    """True for a single non-blank character."""
    return isinstance(value, str) and len(value) == 1 and value != BLANK
