from __future__ import annotations
from typing import Any, Dict, Optional, Protocol

from c4engine.game.state import GameState
from c4engine.types import Move


class Agent(Protocol):
    """
    Anything that can take PlayerTwo's seat in the console game or a seat
    in the tier league. `last_info` describes the most recent move
    (depth, nodes, cutoffs, time_ms, ...); the status line and the league
    log read it.
    """

    name: str
    last_info: Dict[str, Any]

    def choose_move(self, state: GameState) -> Optional[Move]:
        """Column to play for `state.current_player`, or None when the board is full."""
        ...
