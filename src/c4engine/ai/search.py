from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from math import inf
from typing import Any, Optional, Protocol, Sequence

from c4engine.config import EASY_RANDOM_MOVE_PROB, WIN_SCORE
from c4engine.core.board import Board, get_valid_columns
from c4engine.core.moves import make_move
from c4engine.core.rules import check_winner
from c4engine.core.scoring import evaluate
from c4engine.types import Player, other

logger = logging.getLogger(__name__)


class MoveRng(Protocol):
    """The slice of `random.Random` the selector needs."""

    def random(self) -> float:
        ...

    def choice(self, seq: Sequence[Any]) -> Any:
        ...


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0
    random_move: bool = False


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    ai_player: Player,
    stats: Optional[SearchStats] = None,
) -> float:
    if stats is not None:
        stats.nodes += 1

    winner = check_winner(board).winner
    if winner == ai_player:
        return WIN_SCORE
    if winner is not None:
        return -WIN_SCORE

    cols = get_valid_columns(board)
    if not cols or depth <= 0:
        return evaluate(board, ai_player)

    if maximizing:
        value = -inf
        for col in cols:
            child = make_move(board, col, ai_player)
            if child is None:
                continue
            value = max(value, minimax(child, depth - 1, alpha, beta, False, ai_player, stats))
            alpha = max(alpha, value)
            if beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break
        return value

    opp = other(ai_player)
    value = inf
    for col in cols:
        child = make_move(board, col, opp)
        if child is None:
            continue
        value = min(value, minimax(child, depth - 1, alpha, beta, True, ai_player, stats))
        beta = min(beta, value)
        if beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break
    return value


def get_best_move(
    board: Board,
    ai_player: Player,
    depth: int,
    rng: Optional[MoveRng] = None,
    random_move_prob: float = EASY_RANDOM_MOVE_PROB,
    stats: Optional[SearchStats] = None,
) -> Optional[int]:
    """
    Pick a column for `ai_player`, or None if the board has no valid column.

    At depth 1 (the easy tier) the selector first flips a weighted coin with
    `rng` and, on success, plays a uniformly random valid column without
    searching. Otherwise every valid column is scored with `minimax` from the
    opponent's reply; the strictly best score wins and the lowest column
    index breaks ties.
    """
    cols = get_valid_columns(board)
    if not cols:
        return None

    if rng is None:
        rng = random.Random()

    if depth == 1 and rng.random() < random_move_prob:
        col = rng.choice(cols)
        if stats is not None:
            stats.random_move = True
        logger.debug("random move: col=%d", col)
        return col

    best_col = cols[0]
    best_score = -inf

    for col in cols:
        child = make_move(board, col, ai_player)
        if child is None:
            continue
        score = minimax(child, depth, -inf, inf, False, ai_player, stats)
        if score > best_score:
            best_score = score
            best_col = col

    logger.debug(
        "best move: col=%d score=%s depth=%d nodes=%s",
        best_col,
        best_score,
        depth,
        stats.nodes if stats is not None else "-",
    )
    return best_col
