"""Connect-4 engine: board model, win detection, heuristic and minimax AI."""

from c4engine.ai.search import SearchStats, get_best_move, minimax
from c4engine.core.board import (
    Board,
    create_empty_board,
    get_next_available_row,
    get_valid_columns,
    is_column_full,
)
from c4engine.core.moves import make_move
from c4engine.core.rules import WinResult, check_winner, is_board_full, is_draw
from c4engine.core.scoring import evaluate
from c4engine.game.results import calculate_score
from c4engine.types import EMPTY, PLAYER_ONE, PLAYER_TWO, Position

__all__ = [
    "Board",
    "EMPTY",
    "PLAYER_ONE",
    "PLAYER_TWO",
    "Position",
    "SearchStats",
    "WinResult",
    "calculate_score",
    "check_winner",
    "create_empty_board",
    "evaluate",
    "get_best_move",
    "get_next_available_row",
    "get_valid_columns",
    "is_board_full",
    "is_column_full",
    "is_draw",
    "make_move",
    "minimax",
]
