from __future__ import annotations

# Facade module that re-exports the tiling core.
# Used by the Flask app and tests; single-responsibility modules live under tiling_core/*.

from tiling_core.cells import BLANK, Color, Pos, ShapeError, is_color
from tiling_core.normalize import normalize, shift_squares, strip_blanks, min_corner, extent
from tiling_core.transforms import TRANSFORM_NAMES
from tiling_core.tile import Tile
from tiling_core.placement import MODES, Placement, variants, placements, place
from tiling_core.serial import (
    SerializableTile,
    tile_to_json,
    tile_from_json,
    board_to_json,
    tile_from_rows,
    tile_from_text,
    rows_from_json,
)
from tiling_core.pieces import PENTOMINO_ROWS, pentomino, pentomino_set, rectangle, checkerboard
from tiling_core.store import save_library, load_library

__all__ = [
    'BLANK', 'Color', 'Pos', 'ShapeError', 'is_color',
    'normalize', 'shift_squares', 'strip_blanks', 'min_corner', 'extent',
    'TRANSFORM_NAMES', 'Tile',
    'MODES', 'Placement', 'variants', 'placements', 'place',
    'SerializableTile', 'tile_to_json', 'tile_from_json', 'board_to_json',
    'tile_from_rows', 'tile_from_text', 'rows_from_json',
    'PENTOMINO_ROWS', 'pentomino', 'pentomino_set', 'rectangle', 'checkerboard',
    'save_library', 'load_library',
]
