# src/c4engine/types.py

from __future__ import annotations
from typing import Literal, NamedTuple, NewType, Optional

Player = Literal[1, 2]
Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..6
Difficulty = Literal["easy", "medium", "hard"]

EMPTY: Cell = None
PLAYER_ONE: Player = 1  # human
PLAYER_TWO: Player = 2  # AI


class Position(NamedTuple):
    row: int
    col: int


def other(player: Player) -> Player:
    return PLAYER_TWO if player == PLAYER_ONE else PLAYER_ONE
