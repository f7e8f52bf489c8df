from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from .cells import Pos, ShapeError
from .tile import Tile

# How freely a piece may be reoriented before it is placed.
MODES = ('none', 'rotations', 'reflections', 'all')

_MODE_ATTR = {
    'none': 'no_transform',
    'rotations': 'rotations',
    'reflections': 'reflections',
    'all': 'transformations',
}


def variants(tile: Tile, mode: str = 'none') -> Tuple[Tile, ...]:
    """Orientations of `tile` allowed under `mode`, identity first."""
    attr = _MODE_ATTR.get(mode)
    if attr is None:
        raise ShapeError(f"Unknown mode {mode!r}; expected one of {MODES}")
    return getattr(tile, attr)


@dataclass(frozen=True)
class Placement:
    """A piece orientation put down on a board with its origin at (x, y)."""
    tile: Tile
    x: int
    y: int

    def cells(self) -> List[Pos]:
        """Absolute board positions covered by the piece."""
        return sorted((self.x + px, self.y + py) for px, py in self.tile.squares)


def placements(piece: Tile, board: Tile, mode: str = 'none') -> List[Placement]:
    """Every (orientation, offset) at which `piece` fits on `board`.

    Offsets are limited to those keeping the piece inside the board's bounding
    box; sorted by row, then column, then orientation order.
    """
    if piece.size == 0:
        return []
    found: List[Tuple[int, int, int, Placement]] = []
    for order, v in enumerate(variants(piece, mode)):
        for y in range(board.height - v.height + 1):
            for x in range(board.width - v.width + 1):
                if v.fit_at(board, x, y):
                    found.append((y, x, order, Placement(v, x, y)))
    found.sort(key=lambda it: it[:3])
    return [p for _, _, _, p in found]


def place(board: Tile, placement: Placement) -> Tile:
    """Board left over once `placement` has been carved out of it."""
    return board.without(placement.tile, placement.x, placement.y)
