import unittest

from puzzle import (
    Placement,
    ShapeError,
    Tile,
    checkerboard,
    pentomino,
    pentomino_set,
    place,
    placements,
    rectangle,
    tile_from_rows,
    variants,
)


class TestFitAndWithout(unittest.TestCase):
    def test_given_any_tile_when_fit_on_itself_then_true(self):
        shapes = list(pentomino_set().values()) + [
            Tile({(0, 0): 'a', (1, 1): 'b'}),
            checkerboard(3, 4),
            Tile(),
        ]
        for t in shapes:
            self.assertTrue(t.fit_at(t, 0, 0))

    def test_given_checkerboard_when_fitting_domino_then_color_must_match(self):
        board = checkerboard(4, 4)
        piece = tile_from_rows(['ab'])
        self.assertTrue(piece.fit_at(board, 0, 0))
        self.assertFalse(piece.fit_at(board, 1, 0))  # lands on 'b','a'
        self.assertFalse(piece.fit_at(board, 0, 1))
        self.assertTrue(piece.fit_at(board, 1, 1))
        # off the board on the right
        self.assertFalse(piece.fit_at(board, 3, 0))
        self.assertFalse(piece.fit_at(board, -1, 0))

    def test_given_empty_piece_when_fit_anywhere_then_true(self):
        self.assertTrue(Tile().fit_at(Tile(), 5, -3))
        self.assertTrue(Tile().fit_at(checkerboard(2, 2), 100, 100))

    def test_given_fit_when_carving_then_cells_removed_and_frame_kept(self):
        board = checkerboard(4, 4)
        piece = tile_from_rows(['ab'])
        x, y = 1, 1
        self.assertTrue(piece.fit_at(board, x, y))
        rest = board.without(piece, x, y)
        self.assertEqual(rest.size, board.size - piece.size)
        for (px, py) in piece.squares:
            self.assertIsNone(rest.cell_at(x + px, y + py))
        # untouched cells keep their absolute positions
        self.assertEqual(rest.cell_at(0, 0), 'a')
        self.assertEqual(rest.cell_at(3, 3), 'a')
        self.assertEqual(rest.dims, (4, 4))

    def test_given_carved_corner_when_without_then_not_reanchored(self):
        board = rectangle(3, 1)
        rest = board.without(tile_from_rows(['a']), 0, 0)
        self.assertEqual(dict(rest.squares), {(1, 0): 'a', (2, 0): 'a'})
        self.assertEqual(rest.width, 3)
        # the carved cell is no longer available
        self.assertFalse(tile_from_rows(['a']).fit_at(rest, 0, 0))
        self.assertTrue(tile_from_rows(['aa']).fit_at(rest, 1, 0))

    def test_given_piece_outside_board_when_without_then_board_unchanged(self):
        board = checkerboard(2, 2)
        rest = board.without(pentomino('X'), 10, 10)
        self.assertEqual(dict(rest.squares), dict(board.squares))

    def test_given_without_when_piece_overlaps_partially_then_only_covered_removed(self):
        board = rectangle(2, 2)
        rest = board.without(rectangle(2, 2), 1, 1)
        self.assertEqual(dict(rest.squares), {(0, 0): 'a', (1, 0): 'a', (0, 1): 'a'})


class TestPlacements(unittest.TestCase):
    def test_given_modes_when_asking_variants_then_matching_group(self):
        t = pentomino('L')
        self.assertEqual(variants(t, 'none'), (t,))
        self.assertEqual(variants(t, 'rotations'), t.rotations)
        self.assertEqual(variants(t, 'reflections'), t.reflections)
        self.assertEqual(variants(t, 'all'), t.transformations)
        self.assertEqual(variants(t), (t,))
        with self.assertRaises(ShapeError):
            variants(t, 'sideways')

    def test_given_domino_on_checkerboard_when_listing_placements_then_all_orientations(self):
        board = tile_from_rows(['ab', 'ba'])
        piece = tile_from_rows(['ab'])
        fixed = placements(piece, board)
        self.assertEqual(fixed, [Placement(piece, 0, 0)])

        found = placements(piece, board, 'rotations')
        self.assertEqual(len(found), 4)
        self.assertEqual([(p.x, p.y) for p in found], [(0, 0), (0, 0), (1, 0), (0, 1)])
        self.assertEqual(found[0].tile, piece)
        self.assertEqual(found[1].tile, tile_from_rows(['a', 'b']))
        for p in found:
            self.assertTrue(p.tile.fit_at(board, p.x, p.y))

    def test_given_monochrome_board_when_counting_placements_then_known_totals(self):
        self.assertEqual(len(placements(pentomino('F'), rectangle(8, 8, 'F'), 'all')), 8 * 36)
        self.assertEqual(len(placements(pentomino('I'), rectangle(5, 5, 'I'), 'all')), 10)
        self.assertEqual(len(placements(pentomino('I'), rectangle(5, 5, 'I'), 'none')), 5)
        # wrong color never fits
        self.assertEqual(placements(pentomino('F'), rectangle(8, 8, 'a'), 'all'), [])

    def test_given_empty_piece_when_listing_placements_then_none(self):
        self.assertEqual(placements(Tile(), rectangle(3, 3)), [])

    def test_given_placement_when_placed_then_board_shrinks(self):
        board = rectangle(5, 2, 'I')
        found = placements(pentomino('I'), board, 'all')
        self.assertEqual(len(found), 2)
        first = found[0]
        self.assertEqual(first.cells(), [(x, 0) for x in range(5)])
        rest = place(board, first)
        self.assertEqual(rest.size, 5)
        self.assertEqual(placements(pentomino('I'), rest, 'all'), [Placement(pentomino('I'), 0, 1)])
        self.assertEqual(place(rest, found[1]).size, 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
