from __future__ import annotations
from typing import Optional

from c4engine.core.board import Board, get_next_available_row
from c4engine.types import Move

QUIT_WORDS = frozenset({"q", "quit", "exit"})


def parse_move(raw: str, board: Board) -> Optional[Move]:
    """
    Read a 1-based column for a drop on `board`; None means quit.

    Raises ValueError with a message fit for the status line when the
    input is not a number, is off the board, or names a full column.
    """
    text = raw.strip().lower()
    if text in QUIT_WORDS:
        return None

    try:
        number = int(text)
    except ValueError:
        raise ValueError("Invalid input. Enter a number or q.") from None

    width = len(board.grid[0])
    if not 1 <= number <= width:
        raise ValueError(f"Column must be between 1 and {width}.")

    if get_next_available_row(board, number - 1) is None:
        raise ValueError(f"Column {number} is full.")
    return Move(number - 1)
