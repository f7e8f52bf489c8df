from __future__ import annotations

import os
import sys
from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from the repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from puzzle import (  # noqa: E402
    MODES,
    ShapeError,
    Tile,
    board_to_json,
    pentomino_set,
    place,
    placements,
    rows_from_json,
    tile_from_json,
    tile_from_rows,
    tile_to_json,
    variants,
)

DEBUG = os.getenv("TILING_DEBUG", "0").lower() in ("1", "true", "yes", "on")

app = Flask(__name__)


def _debug(msg: str) -> None:
    if DEBUG:
        print(f"[api] {msg}")


def tile_from_arg(value: Any, pad: bool = False) -> Tile:
    """A tile given either as text rows or as a tile_to_json() record."""
    if isinstance(value, list):
        return tile_from_rows(rows_from_json(value), pad=pad)
    if isinstance(value, dict):
        tile = tile_from_json(value)
        # Records keep their stored frame; pieces are re-anchored like parsed rows
        return tile if pad else tile.copy()
    raise ShapeError("expected a list of rows or a tile record")


def _body() -> Dict[str, Any]:
    body = request.get_json(force=True, silent=True)
    return body if isinstance(body, dict) else {}


def _int_arg(body: Dict[str, Any], key: str) -> int:
    value = body.get(key, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ShapeError(f"{key} must be an integer")
    return value


def _piece_and_board(body: Dict[str, Any]) -> Tuple[Tile, Tile]:
    if "piece" not in body or "board" not in body:
        raise ShapeError("piece and board required")
    # Boards keep their absolute frame so offsets stay meaningful
    return tile_from_arg(body["piece"]), tile_from_arg(body["board"], pad=True)


def tile_payload(tile: Tile) -> Dict[str, Any]:
    return {"tile": tile_to_json(tile), "board": board_to_json(tile), "text": str(tile)}


def _bad_request(e: Exception):
    _debug(f"rejected request: {e}")
    return jsonify({"ok": False, "error": f"bad tile: {e}"}), 400


@app.get("/api/pieces")
def api_pieces() -> Any:
    pieces = pentomino_set()
    return jsonify({"ok": True, "pieces": {name: board_to_json(t) for name, t in pieces.items()}})


@app.post("/api/tile")
def api_tile() -> Any:
    body = _body()
    try:
        tile = tile_from_arg(body.get("rows", body.get("tile")))
    except ShapeError as e:
        return _bad_request(e)
    out = {"ok": True}
    out.update(tile_payload(tile))
    return jsonify(out)


@app.post("/api/variants")
def api_variants() -> Any:
    body = _body()
    mode = str(body.get("mode", "all"))
    try:
        tile = tile_from_arg(body.get("rows", body.get("tile")))
        found = variants(tile, mode)
    except ShapeError as e:
        return _bad_request(e)
    _debug(f"{len(found)} variant(s) for size={tile.size} mode={mode}")
    return jsonify({"ok": True, "mode": mode, "variants": [tile_payload(v) for v in found]})


@app.post("/api/fit")
def api_fit() -> Any:
    body = _body()
    try:
        piece, board = _piece_and_board(body)
        x, y = _int_arg(body, "x"), _int_arg(body, "y")
    except ShapeError as e:
        return _bad_request(e)
    return jsonify({"ok": True, "fits": piece.fit_at(board, x, y)})


@app.post("/api/without")
def api_without() -> Any:
    body = _body()
    try:
        piece, board = _piece_and_board(body)
        x, y = _int_arg(body, "x"), _int_arg(body, "y")
    except ShapeError as e:
        return _bad_request(e)
    rest = board.without(piece, x, y)
    out = {"ok": True}
    out.update(tile_payload(rest))
    return jsonify(out)


@app.post("/api/placements")
def api_placements() -> Any:
    body = _body()
    mode = str(body.get("mode", "none"))
    if mode not in MODES:
        return jsonify({"ok": False, "error": f"mode must be one of {list(MODES)}"}), 400
    try:
        piece, board = _piece_and_board(body)
    except ShapeError as e:
        return _bad_request(e)
    found = placements(piece, board, mode)
    return jsonify({
        "ok": True,
        "count": len(found),
        "placements": [
            {"x": p.x, "y": p.y, "tile": tile_to_json(p.tile), "rest": board_to_json(place(board, p))}
            for p in found
        ],
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "5000")), debug=debug)
