from __future__ import annotations
import math
from typing import Optional

from c4engine.config import COLS, DIFFICULTY_MULTIPLIER, ROWS, SCORE_BASE, SCORE_SPEED_BONUS
from c4engine.game.state import GameState
from c4engine.types import Difficulty, Player, PLAYER_ONE, PLAYER_TWO

TOTAL_CELLS = ROWS * COLS


def calculate_score(winner: Optional[Player], move_count: int, difficulty: Difficulty) -> int:
    """
    Progress score for a finished game. Only a human win scores; fewer moves
    and harder tiers score more.
    """
    if winner != PLAYER_ONE:
        return 0
    if difficulty not in DIFFICULTY_MULTIPLIER:
        raise ValueError(f"Unknown difficulty: {difficulty!r}")

    speed_bonus = max(0, TOTAL_CELLS - move_count) * SCORE_SPEED_BONUS
    return math.floor((SCORE_BASE + speed_bonus) * DIFFICULTY_MULTIPLIER[difficulty])


def completion_title(state: GameState) -> str:
    if state.winner == PLAYER_ONE:
        return "You Won!"
    if state.winner == PLAYER_TWO:
        return "Game Over"
    return "It's a Draw!"


def completion_message(state: GameState, difficulty: Difficulty) -> str:
    if state.winner == PLAYER_ONE:
        score = calculate_score(state.winner, state.move_count, difficulty)
        return f"You won in {state.move_count} moves! Score: {score}"
    if state.winner == PLAYER_TWO:
        return "AI wins! Better luck next time!"
    return "It's a draw! The board is full."
