import unittest
import sys
import os

# srcディレクトリをパスに追加
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "src")))

from go_rules.core.board import Stone, create
from go_rules.core.group_analyzer import count_liberties, find_group, liberties


class TestGroupAnalyzer(unittest.TestCase):
    def setUp(self):
        # 5路盤
        # . . . . .
        # . B B . .
        # . . B W .
        self.board = create(5)
        for pos in (6, 7, 12):
            self.board.cells[pos] = Stone.BLACK
        self.board.cells[13] = Stone.WHITE

    def test_empty_point_has_no_group(self):
        self.assertEqual(find_group(self.board, 0), frozenset())

    def test_connected_group(self):
        self.assertEqual(find_group(self.board, 6), {6, 7, 12})
        self.assertEqual(find_group(self.board, 12), {6, 7, 12})
        self.assertEqual(find_group(self.board, 13), {13})

    def test_diagonal_stones_are_not_connected(self):
        self.board.cells[18] = Stone.BLACK
        self.assertNotIn(18, find_group(self.board, 12))

    def test_shared_liberty_is_counted_once(self):
        group = find_group(self.board, 6)
        # 11 は 6 と 12 の両方に接する
        self.assertEqual(liberties(self.board, group), {1, 2, 5, 8, 11, 17})
        self.assertEqual(count_liberties(self.board, group), 6)

    def test_empty_group_has_zero_liberties(self):
        self.assertEqual(count_liberties(self.board, frozenset()), 0)

    def test_large_group_does_not_recurse(self):
        b = create(60)
        for pos in range(b.num_cells - 1):
            b.cells[pos] = Stone.BLACK
        group = find_group(b, 0)
        self.assertEqual(len(group), b.num_cells - 1)
        self.assertEqual(count_liberties(b, group), 1)


if __name__ == "__main__":
    unittest.main()
