import unittest

from c4engine.core.board import create_empty_board
from c4engine.core.scoring import evaluate
from c4engine.types import PLAYER_ONE, PLAYER_TWO

from boards import parse_board


def _bottom_row(row: str):
    return parse_board(".......", ".......", ".......", ".......", ".......", row)


class TestHeuristicEvaluator(unittest.TestCase):
    def test_empty_board_scores_zero(self):
        board = create_empty_board()
        self.assertEqual(evaluate(board, PLAYER_ONE), 0)
        self.assertEqual(evaluate(board, PLAYER_TWO), 0)

    def test_single_piece_scores_zero(self):
        board = _bottom_row("...2...")
        self.assertEqual(evaluate(board, PLAYER_TWO), 0)
        self.assertEqual(evaluate(board, PLAYER_ONE), 0)

    def test_open_three(self):
        """
        Row 5 windows: [2,2,2,.] = +5, [2,2,.,.] = +2, the rest hold one piece.
        """
        board = _bottom_row("222....")
        self.assertEqual(evaluate(board, PLAYER_TWO), 7)

    def test_opponent_three_is_penalised(self):
        # Only [2,2,2,.] counts against PlayerOne; opponent twos are ignored.
        board = _bottom_row("222....")
        self.assertEqual(evaluate(board, PLAYER_ONE), -4)

    def test_four_in_a_row_window(self):
        board = _bottom_row("2222...")
        # 100 + 5 + 2 + 0
        self.assertEqual(evaluate(board, PLAYER_TWO), 107)

    def test_blocked_windows_score_zero(self):
        # [1,2,2,2] is dead; [2,2,2,.] and [2,2,.,.] still count.
        board = _bottom_row("1222...")
        self.assertEqual(evaluate(board, PLAYER_TWO), 7)

    def test_vertical_and_diagonal_windows_count(self):
        board = parse_board(
            ".......",
            ".......",
            ".......",
            "2......",
            "21.....",
            "21.....",
        )
        # Column 0: [.,2,2,2] = +5 and [.,.,2,2] = +2
        # Row 5 [2,1,.,.] and row 4 [2,1,.,.] are mixed; column 1 holds the opponent's two.
        self.assertEqual(evaluate(board, PLAYER_TWO), 7)


if __name__ == "__main__":
    unittest.main()
