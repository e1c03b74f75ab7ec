# src/c4engine/core/moves.py

from __future__ import annotations
from typing import Optional

from c4engine.core.board import Board, get_next_available_row
from c4engine.types import Player


def make_move(board: Board, col: int, player: Player) -> Optional[Board]:
    """
    Drop `player` into `col` and return the resulting board.

    Returns None when the column is full. `board` itself is never modified.
    """
    row = get_next_available_row(board, col)
    if row is None:
        return None
    return board.place(row, int(col), player)
