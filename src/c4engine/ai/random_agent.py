from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Optional

from c4engine.core.board import get_valid_columns
from c4engine.game.state import GameState
from c4engine.types import Move


@dataclass(slots=True)
class RandomAgent:
    name: str = "Random AI"
    rng: random.Random = field(default_factory=random.Random)
    last_info: dict = field(default_factory=dict)

    def choose_move(self, state: GameState) -> Optional[Move]:
        moves = get_valid_columns(state.board)
        if not moves:
            return None
        move = Move(self.rng.choice(moves))
        self.last_info = {"depth": 0, "nodes": 0, "cutoffs": 0, "move_col": int(move) + 1, "time_ms": 0}
        return move
