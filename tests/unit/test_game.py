import unittest
import sys
import os

# srcディレクトリをパスに追加
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "..", "src")))

from pydantic import ValidationError

from go_rules.core.board import Stone, create
from go_rules.core.errors import OccupiedError
from go_rules.core.game import apply_move, board_view, is_game_over, pass_turn
from go_rules.core.move import Move, PASS


class TestCaptures(unittest.TestCase):
    def test_corner_capture(self):
        """9路盤: 黒 0、白 1、(黒 80)、白 9 で隅の黒が取られる"""
        b = create(9)
        apply_move(b, 0)
        apply_move(b, 1)
        apply_move(b, 80)
        apply_move(b, 9)
        self.assertEqual(b.get(0), Stone.EMPTY)
        self.assertEqual(b.captured[Stone.WHITE], 1)
        self.assertEqual(b.captured[Stone.BLACK], 0)
        self.assertEqual(b.history[-1], Move(Stone.WHITE, 9, frozenset({0})))

    def test_capture_removes_exactly_the_group(self):
        b = create(9)
        for pos in (0, 9, 1, 10, 80, 2):
            apply_move(b, pos)
        # 黒 0,1 の2子が取られ、黒 80 は残る
        self.assertEqual(b.get(0), Stone.EMPTY)
        self.assertEqual(b.get(1), Stone.EMPTY)
        self.assertEqual(b.get(80), Stone.BLACK)
        for pos in (2, 9, 10):
            self.assertEqual(b.get(pos), Stone.WHITE)
        self.assertEqual(b.captured[Stone.WHITE], 2)
        self.assertEqual(b.history[-1].captured_positions, {0, 1})
        stones = sum(1 for s in b.cells if s != Stone.EMPTY)
        self.assertEqual(stones, 4)

    def test_multi_group_capture(self):
        # 黒 3 と 5 はどちらも 4 だけが呼吸点。白 4 で両方を取る
        b = create(9)
        for pos in (3, 2, 5, 12, 80, 6, 79, 14, 78, 4):
            apply_move(b, pos)
        self.assertEqual(b.get(3), Stone.EMPTY)
        self.assertEqual(b.get(5), Stone.EMPTY)
        self.assertEqual(b.get(4), Stone.WHITE)
        self.assertEqual(b.captured[Stone.WHITE], 2)
        self.assertEqual(b.history[-1].captured_positions, {3, 5})

    def test_group_touched_twice_is_captured_once(self):
        # 白 10 は黒の連 (0,1,9) の 1 と 9 の両方に接する
        # B B W
        # B W .
        # W . .
        b = create(9)
        for pos in (0, 2, 1, 18, 9, 80, 79, 10):
            apply_move(b, pos)
        self.assertEqual(b.captured[Stone.WHITE], 3)
        self.assertEqual(b.history[-1].captured_positions, {0, 1, 9})
        self.assertEqual(b.get(10), Stone.WHITE)

    def test_no_capture_records_empty_set(self):
        b = create(9)
        apply_move(b, 40)
        self.assertEqual(b.history[-1].captured_positions, frozenset())


class TestTurns(unittest.TestCase):
    def test_alternation(self):
        b = create(9)
        self.assertEqual(b.to_move, Stone.BLACK)
        apply_move(b, 40)
        self.assertEqual(b.to_move, Stone.WHITE)
        pass_turn(b)
        self.assertEqual(b.to_move, Stone.BLACK)
        pass_turn(b)
        self.assertEqual(b.to_move, Stone.WHITE)
        apply_move(b, 41)
        self.assertEqual(b.to_move, Stone.BLACK)

    def test_failed_move_keeps_turn(self):
        b = create(9)
        apply_move(b, 40)
        with self.assertRaises(OccupiedError):
            apply_move(b, 40)
        self.assertEqual(b.to_move, Stone.WHITE)
        self.assertEqual(len(b.history), 1)

    def test_snapshot_is_previous_grid(self):
        b = create(9)
        apply_move(b, 40)
        self.assertEqual(b.prior_snapshot, [Stone.EMPTY] * 81)
        expected = b.snapshot()
        apply_move(b, 41)
        self.assertEqual(b.prior_snapshot, expected)
        pass_turn(b)
        self.assertEqual(b.prior_snapshot, expected)

    def test_pass_record(self):
        b = create(9)
        pass_turn(b)
        self.assertEqual(b.history, [Move(Stone.BLACK, PASS, frozenset())])
        self.assertTrue(b.history[0].is_pass)


class TestGameOver(unittest.TestCase):
    def test_fewer_than_two_moves(self):
        b = create(9)
        self.assertFalse(is_game_over(b))
        pass_turn(b)
        self.assertFalse(is_game_over(b))

    def test_two_passes(self):
        b = create(9)
        apply_move(b, 40)
        pass_turn(b)
        pass_turn(b)
        self.assertTrue(is_game_over(b))

    def test_non_pass_tail(self):
        b = create(9)
        pass_turn(b)
        apply_move(b, 40)
        pass_turn(b)
        self.assertFalse(is_game_over(b))
        apply_move(b, 41)
        self.assertFalse(is_game_over(b))


class TestBoardView(unittest.TestCase):
    def test_view_contents(self):
        b = create(9)
        for pos in (0, 1, 80, 9):
            apply_move(b, pos)
        view = board_view(b)
        self.assertEqual(view.size, 9)
        self.assertEqual(len(view.grid), 9)
        self.assertEqual(view.grid[0][0], 0)
        self.assertEqual(view.grid[0][1], 2)
        self.assertEqual(view.grid[8][8], 1)
        self.assertEqual(view.to_move, "black")
        self.assertEqual(view.captures, {"black": 0, "white": 1})
        self.assertFalse(view.game_over)
        self.assertEqual(view.move_number, 4)
        self.assertEqual(view.last_move.color, "W")
        self.assertEqual(view.last_move.coord, "A2")
        self.assertEqual(view.last_move.captured, [0])
        self.assertEqual(view.history[0].to_list(), ["B", "A1"])

    def test_view_reports_game_over(self):
        b = create(9)
        pass_turn(b)
        pass_turn(b)
        view = board_view(b)
        self.assertTrue(view.game_over)
        self.assertEqual(view.last_move.coord, "pass")
        self.assertEqual(view.last_move.position, -1)
        data = view.model_dump()
        self.assertEqual(data["to_move"], "black")
        self.assertIn('"game_over":true', view.model_dump_json())

    def test_view_is_read_only(self):
        view = board_view(create(9))
        with self.assertRaises(ValidationError):
            view.to_move = "white"


if __name__ == "__main__":
    unittest.main()
