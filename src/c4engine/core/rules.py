from __future__ import annotations
from typing import Iterator, List, NamedTuple, Optional, Tuple

from c4engine.config import ROWS, COLS, CONNECT_N
from c4engine.core.board import Board
from c4engine.types import Player, Position


class WinResult(NamedTuple):
    winner: Optional[Player]
    winning_cells: List[Position]


def _anchors() -> Iterator[Tuple[int, int, int, int]]:
    """
    Yield (row, col, dr, dc) for every run start, in detection priority order.
    """
    # Horizontal: rows top-to-bottom, columns left-to-right
    for r in range(ROWS):
        for c in range(COLS - CONNECT_N + 1):
            yield r, c, 0, 1

    # Vertical: columns left-to-right, rows top-to-bottom
    for c in range(COLS):
        for r in range(ROWS - CONNECT_N + 1):
            yield r, c, 1, 0

    # Diagonal down-right
    for r in range(ROWS - CONNECT_N + 1):
        for c in range(COLS - CONNECT_N + 1):
            yield r, c, 1, 1

    # Diagonal down-left
    for r in range(ROWS - CONNECT_N + 1):
        for c in range(CONNECT_N - 1, COLS):
            yield r, c, 1, -1


# Precomputed once; the board size is fixed.
RUNS: Tuple[Tuple[Position, ...], ...] = tuple(
    tuple(Position(r + i * dr, c + i * dc) for i in range(CONNECT_N))
    for (r, c, dr, dc) in _anchors()
)


def check_winner(board: Board) -> WinResult:
    g = board.grid
    for run in RUNS:
        r0, c0 = run[0]
        p = g[r0][c0]
        if p is None:
            continue
        if all(g[r][c] == p for (r, c) in run[1:]):
            return WinResult(p, list(run))
    return WinResult(None, [])


def is_board_full(board: Board) -> bool:
    # Gravity: a full top row means a full board.
    return board.is_full()


def is_draw(board: Board) -> bool:
    return is_board_full(board) and check_winner(board).winner is None
