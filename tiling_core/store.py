from __future__ import annotations

import json
import os
from typing import Dict, Optional

from .cells import ShapeError
from .serial import tile_from_json, tile_to_json
from .tile import Tile

DEFAULT_LIBRARY = os.getenv('TILING_LIBRARY', os.path.join('data', 'tiles.json'))


def _ensure_dir(path: str) -> None:
    """Ensures the directory for the library file exists before writing."""
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def save_library(tiles: Dict[str, Tile], path: Optional[str] = None) -> str:
    """Writes named tiles as {"tiles": {name: record}}; returns the path used."""
    target = path or DEFAULT_LIBRARY
    _ensure_dir(target)
    payload = {"tiles": {name: tile_to_json(t) for name, t in sorted(tiles.items())}}
    with open(target, 'w', encoding='utf-8') as f:
        json.dump(payload, f, indent=1)
    return target


def load_library(path: Optional[str] = None) -> Dict[str, Tile]:
    """Reads a library written by save_library()."""
    source = path or DEFAULT_LIBRARY
    with open(source, 'r', encoding='utf-8') as f:
        try:
            payload = json.load(f)
        except json.JSONDecodeError as e:
            raise ShapeError(f"{source}: not valid JSON ({e})") from e
    tiles = payload.get('tiles') if isinstance(payload, dict) else None
    if not isinstance(tiles, dict):
        raise ShapeError(f"{source}: expected an object with 'tiles'")
    return {str(name): tile_from_json(rec) for name, rec in tiles.items()}
