from __future__ import annotations

from dataclasses import dataclass, field
import random
import time
from typing import Optional

from c4engine.ai.search import SearchStats, get_best_move
from c4engine.config import AI_DEPTH, EASY_RANDOM_MOVE_PROB
from c4engine.game.state import GameState
from c4engine.types import Difficulty, Move


def depth_for(difficulty: Difficulty) -> int:
    try:
        return AI_DEPTH[difficulty]
    except KeyError:
        raise ValueError(f"Unknown difficulty: {difficulty!r}") from None


@dataclass(slots=True)
class MinimaxAgent:
    """Computer opponent for one difficulty tier; plays whoever is to move."""

    difficulty: Difficulty = "medium"
    name: str = ""
    rng: random.Random = field(default_factory=random.Random)
    random_move_prob: float = EASY_RANDOM_MOVE_PROB

    # Stats
    last_info: dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        depth_for(self.difficulty)
        if not self.name:
            self.name = f"Minimax ({self.difficulty})"

    @property
    def depth(self) -> int:
        return depth_for(self.difficulty)

    def choose_move(self, state: GameState) -> Optional[Move]:
        stats = SearchStats()
        start = time.perf_counter()

        col = get_best_move(
            state.board,
            state.current_player,
            self.depth,
            rng=self.rng,
            random_move_prob=self.random_move_prob,
            stats=stats,
        )

        elapsed = time.perf_counter() - start
        self.last_info = {
            "depth": 0 if stats.random_move else self.depth,
            "nodes": stats.nodes,
            "cutoffs": stats.cutoffs,
            "random": stats.random_move,
            "move_col": None if col is None else col + 1,
            "time_ms": max(1, int(elapsed * 1000)),
        }

        return None if col is None else Move(col)
