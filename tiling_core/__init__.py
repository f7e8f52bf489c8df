"""
Tiling core Python package.

Pure-logic building blocks for a colored tiling/packing puzzle, kept free of
any web or CLI concerns so they are easy to test.
Modules:
- cells.py: Color, Pos, BLANK, ShapeError
- normalize.py: normalize() and translation helpers
- transforms.py: the coordinate remaps behind the dihedral group
- tile.py: Tile
- placement.py: variant modes, Placement, placements(), place()
- serial.py: SerializableTile, JSON and text-grid codecs
- pieces.py: standard piece sets and board builders
- store.py: JSON tile libraries on disk
"""
