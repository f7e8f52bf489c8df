from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List, Optional, Tuple

from .cells import ShapeError
from .pieces import PENTOMINO_ROWS, checkerboard, pentomino
from .placement import MODES, place, placements, variants
from .serial import tile_from_text, tile_to_json
from .store import load_library
from .tile import Tile


def _debug(msg: str) -> None:
    if os.getenv('TILING_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on'):
        print(f"[tiling] {msg}", file=sys.stderr)


def _read_tile(path: str) -> Tile:
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    # Trailing newline from editors is not an extra empty row
    return tile_from_text(text.rstrip('\n'))


def _parse_dims(text: str) -> Tuple[int, int]:
    try:
        w_s, h_s = text.lower().split('x')
        return int(w_s), int(h_s)
    except ValueError:
        raise ShapeError(f"board size must look like WxH, got {text!r}") from None


def _load_piece(args: argparse.Namespace) -> Tile:
    if args.file:
        _debug(f"reading piece from {args.file}")
        return _read_tile(args.file)
    if args.library:
        lib = load_library(args.library)
        if args.piece not in lib:
            raise ShapeError(f"{args.piece!r} not found in {args.library}")
        return lib[args.piece]
    return pentomino(args.piece)


def _load_board(args: argparse.Namespace) -> Optional[Tile]:
    if args.board_file:
        _debug(f"reading board from {args.board_file}")
        return _read_tile(args.board_file)
    if args.board:
        w, h = _parse_dims(args.board)
        return checkerboard(w, h)
    return None


def _show(tile: Tile, as_json: bool) -> None:
    if as_json:
        print(json.dumps(tile_to_json(tile)))
    else:
        print(str(tile))


def run(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Inspect tiling puzzle pieces and where they fit')
    parser.add_argument('--piece', default='F', help=f"Pentomino letter ({''.join(PENTOMINO_ROWS)}) or library name")
    parser.add_argument('--file', default=None, help='Read the piece from a text grid file')
    parser.add_argument('--library', default=None, help='Look --piece up in a JSON tile library')
    parser.add_argument('--mode', choices=list(MODES), default='none', help='Which orientations to consider')
    parser.add_argument('--board', default=None, help='Checkerboard size as WxH')
    parser.add_argument('--board-file', default=None, help='Read the board from a text grid file')
    parser.add_argument('--list', action='store_true', help='List every placement, not just the count')
    parser.add_argument('--json', action='store_true', help='Print JSON records instead of text grids')
    args = parser.parse_args(argv)

    try:
        piece = _load_piece(args)
        board = _load_board(args)
    except (OSError, UnicodeDecodeError, ShapeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    orientations = variants(piece, args.mode)
    _debug(f"piece size={piece.size} dims={piece.dims} orientations={len(orientations)}")
    if board is None:
        print(f"{len(orientations)} orientation(s) under mode '{args.mode}':")
        for v in orientations:
            print()
            _show(v, args.json)
        return 0

    found = placements(piece, board, args.mode)
    print(f"{len(found)} placement(s) on a {board.width}x{board.height} board")
    if args.list:
        for p in found:
            print()
            print(f"at x={p.x} y={p.y}:")
            _show(place(board, p), args.json)
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == '__main__':
    main()
