from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from c4engine.ai.base import Agent
from c4engine.ai.minimax_agent import MinimaxAgent, depth_for
from c4engine.ai.random_agent import RandomAgent
from c4engine.types import Difficulty


@dataclass(frozen=True)
class Team:
    """A league entrant: one difficulty tier, or the random baseline when `difficulty` is None."""

    name: str
    difficulty: Optional[Difficulty] = None

    @property
    def depth(self) -> int:
        return 0 if self.difficulty is None else depth_for(self.difficulty)

    def build(self) -> Agent:
        # Built inside worker processes; Team itself is what gets pickled.
        if self.difficulty is None:
            return RandomAgent(name=self.name)
        return MinimaxAgent(difficulty=self.difficulty, name=self.name)


@dataclass(frozen=True)
class SideLog:
    moves: int = 0
    random_moves: int = 0
    nodes: int = 0
    time_ms: int = 0


@dataclass(frozen=True)
class GameRecord:
    """One headless game. `outcome` is "X", "O" or "D"; X moved first."""

    x: str
    o: str
    seed: int
    outcome: str
    plies: int
    x_log: SideLog
    o_log: SideLog


@dataclass
class Standing:
    depth: int = 0
    games: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0

    moves: int = 0
    random_moves: int = 0
    nodes: int = 0
    time_ms: int = 0

    @property
    def points(self) -> float:
        return self.wins + 0.5 * self.draws

    @property
    def ppg(self) -> float:
        return self.points / self.games if self.games else 0.0

    @property
    def nodes_per_move(self) -> float:
        return self.nodes / self.moves if self.moves else 0.0

    @property
    def ms_per_move(self) -> float:
        return self.time_ms / self.moves if self.moves else 0.0

    def add_game(self, result: str, log: SideLog) -> None:
        """`result` is this team's own "W", "D" or "L"."""
        self.games += 1
        if result == "W":
            self.wins += 1
        elif result == "L":
            self.losses += 1
        else:
            self.draws += 1

        self.moves += log.moves
        self.random_moves += log.random_moves
        self.nodes += log.nodes
        self.time_ms += log.time_ms
