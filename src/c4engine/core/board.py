# src/c4engine/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from c4engine.config import ROWS, COLS
from c4engine.types import Cell, Player, PLAYER_ONE, other

Grid = Tuple[Tuple[Cell, ...], ...]

_EMPTY_GRID: Grid = tuple(tuple(None for _ in range(COLS)) for _ in range(ROWS))


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable 6x7 grid. Row 0 is the top, row 5 the bottom.

    Every change produces a new Board, so search branches can share a parent
    without copying it first.
    """

    grid: Grid = field(default=_EMPTY_GRID)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        if len(rows) != ROWS or any(len(r) != COLS for r in rows):
            raise ValueError(f"Board must be {ROWS}x{COLS}.")
        for r in rows:
            for v in r:
                if v not in (None, 1, 2):
                    raise ValueError(f"Invalid cell value: {v!r}")
        return cls(tuple(tuple(r) for r in rows))

    @classmethod
    def from_moves(cls, cols: Iterable[int], first: Player = PLAYER_ONE) -> "Board":
        """Replay alternating drops starting with `first`. Raises on a full column."""
        board = cls()
        player = first
        for col in cols:
            row = get_next_available_row(board, col)
            if row is None:
                raise ValueError("Column is full.")
            board = board.place(row, col, player)
            player = other(player)
        return board

    def cell(self, row: int, col: int) -> Cell:
        return self.grid[row][col]

    def place(self, row: int, col: int, player: Player) -> "Board":
        # Only the touched row is rebuilt; the other five row tuples are shared.
        new_row = self.grid[row][:col] + (player,) + self.grid[row][col + 1 :]
        return Board(self.grid[:row] + (new_row,) + self.grid[row + 1 :])

    def move_count(self) -> int:
        return sum(1 for row in self.grid for v in row if v is not None)

    def is_full(self) -> bool:
        return all(v is not None for v in self.grid[0])


def _check_column(col: int) -> int:
    c = int(col)
    if c < 0 or c >= COLS:
        raise ValueError("Column out of range.")
    return c


def create_empty_board() -> Board:
    return Board()


def is_column_full(board: Board, col: int) -> bool:
    return board.grid[0][_check_column(col)] is not None


def get_next_available_row(board: Board, col: int) -> Optional[int]:
    c = _check_column(col)
    for r in range(ROWS - 1, -1, -1):
        if board.grid[r][c] is None:
            return r
    return None


def get_valid_columns(board: Board) -> List[int]:
    top = board.grid[0]
    return [c for c in range(COLS) if top[c] is None]
