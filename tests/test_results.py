import unittest

from c4engine.game.results import calculate_score, completion_message, completion_title
from c4engine.game.state import GameState
from c4engine.types import PLAYER_ONE, PLAYER_TWO


class TestScoreCalculator(unittest.TestCase):
    def test_hard_win_scores(self):
        self.assertEqual(calculate_score(PLAYER_ONE, 8, "hard"), 540)
        self.assertEqual(calculate_score(PLAYER_ONE, 40, "hard"), 220)

    def test_fewer_moves_score_higher(self):
        self.assertGreater(calculate_score(PLAYER_ONE, 8, "hard"), calculate_score(PLAYER_ONE, 40, "hard"))

    def test_multipliers(self):
        self.assertEqual(calculate_score(PLAYER_ONE, 7, "easy"), 275)
        # 275 * 1.5 = 412.5, floored
        self.assertEqual(calculate_score(PLAYER_ONE, 7, "medium"), 412)
        self.assertEqual(calculate_score(PLAYER_ONE, 7, "hard"), 550)

    def test_speed_bonus_never_negative(self):
        self.assertEqual(calculate_score(PLAYER_ONE, 42, "easy"), 100)
        self.assertEqual(calculate_score(PLAYER_ONE, 50, "medium"), 150)

    def test_only_human_win_scores(self):
        for difficulty in ("easy", "medium", "hard"):
            for moves in (7, 20, 42):
                self.assertEqual(calculate_score(PLAYER_TWO, moves, difficulty), 0)
                self.assertEqual(calculate_score(None, moves, difficulty), 0)

    def test_unknown_difficulty_raises(self):
        with self.assertRaises(ValueError):
            calculate_score(PLAYER_ONE, 10, "brutal")


class TestCompletionText(unittest.TestCase):
    def test_human_win(self):
        state = GameState(winner=PLAYER_ONE, is_game_over=True, move_count=9)
        self.assertEqual(completion_title(state), "You Won!")
        self.assertEqual(completion_message(state, "easy"), "You won in 9 moves! Score: 265")

    def test_ai_win(self):
        state = GameState(winner=PLAYER_TWO, is_game_over=True, move_count=10)
        self.assertEqual(completion_title(state), "Game Over")
        self.assertEqual(completion_message(state, "hard"), "AI wins! Better luck next time!")

    def test_draw(self):
        state = GameState(is_game_over=True, move_count=42)
        self.assertEqual(completion_title(state), "It's a Draw!")
        self.assertEqual(completion_message(state, "medium"), "It's a draw! The board is full.")


if __name__ == "__main__":
    unittest.main()
