from __future__ import annotations
from typing import Sequence

from c4engine.config import WINDOW_FOUR, WINDOW_OPP_THREE, WINDOW_THREE, WINDOW_TWO
from c4engine.core.board import Board
from c4engine.core.rules import RUNS
from c4engine.types import Cell, Player, other


def _score_window(cells: Sequence[Cell], player: Player) -> int:
    opp = other(player)

    p_count = cells.count(player)
    o_count = cells.count(opp)
    e_count = cells.count(None)

    score = 0

    if p_count == 4:
        score += WINDOW_FOUR
    elif p_count == 3 and e_count == 1:
        score += WINDOW_THREE
    elif p_count == 2 and e_count == 2:
        score += WINDOW_TWO

    # Open opponent three
    if o_count == 3 and e_count == 1:
        score += WINDOW_OPP_THREE

    return score


def evaluate(board: Board, player: Player) -> int:
    """
    Heuristic value of `board` for `player`: the sum of every 4-cell window
    (horizontal, vertical and both diagonals). Higher is better for `player`.
    """
    g = board.grid
    score = 0
    for run in RUNS:
        score += _score_window([g[r][c] for (r, c) in run], player)
    return score
