from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from c4engine.core.board import Board
from c4engine.types import Player, Position, PLAYER_ONE


@dataclass(frozen=True, slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current_player: Player = PLAYER_ONE
    winner: Optional[Player] = None
    winning_cells: List[Position] = field(default_factory=list)
    is_game_over: bool = False
    move_count: int = 0


def new_game() -> GameState:
    return GameState()
