import io
import json
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from tiling_core.cli import run


class TestCli(unittest.TestCase):
    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            rc = run(argv)
        return rc, out.getvalue(), err.getvalue()

    def test_given_pentomino_when_listing_orientations_then_counts_printed(self):
        rc, out, _ = self._run(['--piece', 'X', '--mode', 'all'])
        self.assertEqual(rc, 0)
        self.assertIn("1 orientation(s) under mode 'all'", out)

        rc, out, _ = self._run(['--piece', 'f', '--mode', 'all'])
        self.assertEqual(rc, 0)
        self.assertIn("8 orientation(s)", out)
        self.assertIn(" FF", out)

    def test_given_json_flag_when_listing_then_records_printed(self):
        rc, out, _ = self._run(['--piece', 'I', '--json'])
        self.assertEqual(rc, 0)
        line = [ln for ln in out.splitlines() if ln.startswith('{')][0]
        rec = json.loads(line)
        self.assertEqual(rec["dims"], [5, 1])

    def test_given_board_file_when_counting_placements_then_total(self):
        with tempfile.TemporaryDirectory() as td:
            board_path = os.path.join(td, "board.txt")
            with open(board_path, 'w', encoding='utf-8') as f:
                f.write("IIIII\nIIIII\n")
            rc, out, _ = self._run(['--piece', 'I', '--mode', 'all', '--board-file', board_path, '--list'])
        self.assertEqual(rc, 0)
        self.assertIn("2 placement(s) on a 5x2 board", out)
        self.assertIn("at x=0 y=1:", out)

    def test_given_piece_file_and_checkerboard_when_counting_then_total(self):
        with tempfile.TemporaryDirectory() as td:
            piece_path = os.path.join(td, "piece.txt")
            with open(piece_path, 'w', encoding='utf-8') as f:
                f.write("ab\n")
            rc, out, _ = self._run(['--file', piece_path, '--board', '2x2', '--mode', 'rotations'])
        self.assertEqual(rc, 0)
        self.assertIn("4 placement(s) on a 2x2 board", out)

    def test_given_bad_input_when_running_then_error_exit(self):
        rc, _, err = self._run(['--piece', 'Q'])
        self.assertEqual(rc, 2)
        self.assertIn("error:", err)
        rc, _, err = self._run(['--board', '5by5'])
        self.assertEqual(rc, 2)
        self.assertIn("WxH", err)
        rc, _, err = self._run(['--file', '/nonexistent/piece.txt'])
        self.assertEqual(rc, 2)

    def test_given_non_utf8_file_when_running_then_error_exit(self):
        with tempfile.TemporaryDirectory() as td:
            board_path = os.path.join(td, "board.txt")
            with open(board_path, 'wb') as f:
                f.write(b"\xff\xfeab\n")
            rc, _, err = self._run(['--piece', 'I', '--board-file', board_path])
        self.assertEqual(rc, 2)
        self.assertIn("error:", err)


if __name__ == '__main__':
    unittest.main(verbosity=2)
