from __future__ import annotations

from functools import cached_property, total_ordering
from types import MappingProxyType
from typing import Any, Iterator, List, Mapping, Optional, Tuple

from . import transforms
from .cells import BLANK, Color, Pos, ShapeError
from .normalize import extent, normalize


def _distinct(tiles: List['Tile']) -> Tuple['Tile', ...]:
    """Drops structural duplicates, keeping the first occurrence of each."""
    seen = set()
    out: List[Tile] = []
    for t in tiles:
        if t in seen:
            continue
        seen.add(t)
        out.append(t)
    return tuple(out)


@total_ordering
class Tile:
    """Immutable colored shape: a sparse mapping of (x, y) -> color.

    Built from raw squares through normalize(): blanks are dropped and, unless
    `pad` is set, the shape is anchored at the origin. Two tiles are equal when
    their squares are equal, so unpadded tiles compare equal regardless of the
    translation they were built from.
    """

    def __init__(self, squares: Optional[Mapping[Pos, Color]] = None, pad: bool = False) -> None:
        norm = normalize(squares or {}, pad=pad)
        width, height = extent(norm)
        object.__setattr__(self, '_squares', norm)
        object.__setattr__(self, 'size', len(norm))
        object.__setattr__(self, 'width', width)
        object.__setattr__(self, 'height', height)
        object.__setattr__(self, 'dims', (width, height))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"Tile is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Tile is immutable; cannot delete {name!r}")

    @property
    def squares(self) -> Mapping[Pos, Color]:
        """Read-only view of the non-blank cells."""
        return MappingProxyType(self._squares)

    # ---------- identity ----------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(frozenset(self._squares.items()))

    def sort_key(self) -> Tuple[Tuple[Pos, Color], ...]:
        """Content-based total order: sorted (position, color) pairs."""
        return tuple(sorted(self._squares.items()))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Tile):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __len__(self) -> int:
        return self.size

    def __contains__(self, pos: object) -> bool:
        return pos in self._squares

    def items(self) -> Iterator[Tuple[Pos, Color]]:
        """(position, color) pairs in sorted order."""
        return iter(self.sort_key())

    # ---------- lookup and placement ----------

    def cell_at(self, x: int, y: int) -> Optional[Color]:
        """Color at (x, y), or None when there is no cell (same as blank)."""
        return self._squares.get((x, y))

    def without(self, other: 'Tile', dx: int, dy: int) -> 'Tile':
        """Carves `other`, placed at offset (dx, dy), out of this tile.

        The result is padded: it keeps this tile's coordinate frame so it can
        still be used as a board.
        """
        covered = other._squares
        kept = {
            (x, y): color
            for (x, y), color in self._squares.items()
            if (x - dx, y - dy) not in covered
        }
        return Tile(kept, pad=True)

    def fit_at(self, board: 'Tile', x: int, y: int) -> bool:
        """True if every cell of this tile lands on a same-colored board cell at offset (x, y)."""
        return all(
            board.cell_at(x + px, y + py) == color
            for (px, py), color in self._squares.items()
        )

    def copy(self) -> 'Tile':
        """Unpadded copy; re-anchors a padded tile at the origin."""
        return Tile(self._squares)

    # ---------- transformation group ----------

    @cached_property
    def reflect_lr(self) -> 'Tile':
        return Tile(transforms.reflect_lr(self._squares, self.width, self.height))

    @cached_property
    def reflect_ud(self) -> 'Tile':
        return Tile(transforms.reflect_ud(self._squares, self.width, self.height))

    @cached_property
    def reflect_prim(self) -> 'Tile':
        return Tile(transforms.reflect_prim(self._squares, self.width, self.height))

    @cached_property
    def rotate_about(self) -> 'Tile':
        """180 degree rotation."""
        return self.reflect_lr.reflect_ud

    @cached_property
    def reflect_off(self) -> 'Tile':
        """Mirror across the anti-diagonal."""
        return self.rotate_about.reflect_prim

    @cached_property
    def rotate_left(self) -> 'Tile':
        return self.reflect_prim.reflect_ud

    @cached_property
    def rotate_right(self) -> 'Tile':
        return self.reflect_prim.reflect_lr

    @cached_property
    def rotations(self) -> Tuple['Tile', ...]:
        """Rotation subgroup, for pieces that may not be mirrored."""
        return _distinct([self, self.rotate_about, self.rotate_left, self.rotate_right])

    @cached_property
    def reflections(self) -> Tuple['Tile', ...]:
        return _distinct([self, self.reflect_lr, self.reflect_ud, self.reflect_prim, self.reflect_off])

    @cached_property
    def transformations(self) -> Tuple['Tile', ...]:
        """Full dihedral group: every rotation and mirror image."""
        return _distinct([
            self,
            self.reflect_lr,
            self.reflect_ud,
            self.reflect_prim,
            self.reflect_off,
            self.rotate_about,
            self.rotate_left,
            self.rotate_right,
        ])

    @cached_property
    def no_transform(self) -> Tuple['Tile', ...]:
        return (self,)

    def transform(self, name: str) -> 'Tile':
        """Applies one named transform ('identity' or any of TRANSFORM_NAMES)."""
        if name == 'identity':
            return self
        if name not in transforms.TRANSFORM_NAMES:
            raise ShapeError(f"Unknown transform: {name!r}")
        return getattr(self, name)

    # ---------- rendering ----------

    def __str__(self) -> str:
        lines: List[str] = []
        for y in range(self.height):
            row: List[str] = []
            for x in range(self.width):
                row.append(self.cell_at(x, y) or BLANK)
            lines.append(''.join(row))
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Tile(size={self.size}, dims={self.dims}, squares={dict(self.sort_key())!r})"
