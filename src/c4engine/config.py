# src/c4engine/config.py

from __future__ import annotations

ROWS = 6
COLS = 7
CONNECT_N = 4

# Search depth per difficulty tier (plies)
AI_DEPTH = {
    "easy": 1,
    "medium": 3,
    "hard": 5,
}

# Easy tier: chance of skipping the search for a uniformly random column
EASY_RANDOM_MOVE_PROB = 0.5

# Terminal sentinel; dominates every heuristic score
WIN_SCORE = 1_000_000

# Window weights for the heuristic evaluator
WINDOW_FOUR = 100
WINDOW_THREE = 5
WINDOW_TWO = 2
WINDOW_OPP_THREE = -4

# Score calculator
SCORE_BASE = 100
SCORE_SPEED_BONUS = 5
DIFFICULTY_MULTIPLIER = {
    "easy": 1.0,
    "medium": 1.5,
    "hard": 2.0,
}

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.5  # short pause so AI moves aren’t instant
