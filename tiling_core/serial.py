from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from .cells import BLANK, Color, Pos, ShapeError
from .tile import Tile


@dataclass(frozen=True)
class SerializableTile:
    """Flat snapshot of a Tile's public attributes, for transport and storage."""
    squares: Tuple[Tuple[Pos, Color], ...]  # sorted (position, color) pairs
    size: int
    width: int
    height: int
    dims: Tuple[int, int]

    @classmethod
    def from_tile(cls, tile: Tile) -> 'SerializableTile':
        return cls(
            squares=tile.sort_key(),
            size=tile.size,
            width=tile.width,
            height=tile.height,
            dims=tile.dims,
        )

    def to_tile(self) -> Tile:
        # pad keeps coordinates as stored, so padded tiles survive too
        return Tile(dict(self.squares), pad=True)


def tile_to_json(tile: Tile) -> Dict[str, Any]:
    """JSON-ready record of a tile."""
    rec = SerializableTile.from_tile(tile)
    return {
        "squares": [[int(x), int(y), color] for (x, y), color in rec.squares],
        "size": rec.size,
        "width": rec.width,
        "height": rec.height,
        "dims": [rec.dims[0], rec.dims[1]],
    }


def _entry_to_square(entry: Any) -> Tuple[Pos, Color]:
    """Accepts [x, y, color] or [[x, y], color]."""
    if not isinstance(entry, (list, tuple)):
        raise ShapeError(f"bad square entry: {entry!r}")
    if len(entry) == 3:
        x, y, color = entry
    elif len(entry) == 2 and isinstance(entry[0], (list, tuple)) and len(entry[0]) == 2:
        (x, y), color = entry
    else:
        raise ShapeError(f"bad square entry: {entry!r}")
    if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, int) or not isinstance(y, int):
        raise ShapeError(f"square coordinates must be integers: {entry!r}")
    if x < 0 or y < 0:
        raise ShapeError(f"square coordinates must not be negative: {entry!r}")
    if not isinstance(color, str) or len(color) != 1:
        raise ShapeError(f"color must be a single character: {color!r}")
    return (x, y), color


def tile_from_json(obj: Any) -> Tile:
    """Rebuilds a Tile from tile_to_json() output.

    Derived fields are optional; when present they must agree with the squares.
    Raises ShapeError for records that cannot be read.
    """
    if not isinstance(obj, dict) or "squares" not in obj:
        raise ShapeError("tile record must be an object with 'squares'")
    entries = obj["squares"]
    if not isinstance(entries, list):
        raise ShapeError("'squares' must be a list")
    squares: Dict[Pos, Color] = {}
    for entry in entries:
        pos, color = _entry_to_square(entry)
        squares[pos] = color
    tile = Tile(squares, pad=True)
    expected = {
        "size": tile.size,
        "width": tile.width,
        "height": tile.height,
        "dims": [tile.width, tile.height],
    }
    for key, want in expected.items():
        if key in obj and _as_plain(obj[key]) != want:
            raise ShapeError(f"{key} is {obj[key]!r} but squares give {want!r}")
    return tile


def _as_plain(value: Any) -> Any:
    if isinstance(value, tuple):
        return list(value)
    return value


def board_to_json(tile: Tile) -> Dict[str, Any]:
    """Board viewer payload: width, height and [[x, y], color] entries."""
    return {
        "width": tile.width,
        "height": tile.height,
        "squares": [[[int(x), int(y)], color] for (x, y), color in tile.items()],
    }


def tile_from_rows(rows: Iterable[str], pad: bool = False) -> Tile:
    """Parses a row-major text grid; BLANK characters are empty cells."""
    squares: Dict[Pos, Color] = {}
    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch != BLANK:
                squares[(x, y)] = ch
    return Tile(squares, pad=pad)


def tile_from_text(text: str, pad: bool = False) -> Tile:
    """Inverse of str(tile)."""
    return tile_from_rows(text.split("\n") if text else [], pad=pad)


def rows_from_json(obj: Any) -> List[str]:
    """Validates a JSON list of text rows."""
    if not isinstance(obj, list) or not all(isinstance(r, str) for r in obj):
        raise ShapeError("rows must be a list of strings")
    return list(obj)
