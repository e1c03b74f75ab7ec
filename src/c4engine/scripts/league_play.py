from __future__ import annotations

import random
from typing import Dict, Iterator, List, Sequence, Tuple

from c4engine.core.board import get_valid_columns
from c4engine.game.controller import ai_turn, apply_turn
from c4engine.game.state import new_game
from c4engine.types import PLAYER_ONE, PLAYER_TWO

from .league_types import GameRecord, SideLog, Team

OPENING_PLIES = 2

Pairing = Tuple[Team, Team, int]


def seed_agent(agent, seed: int) -> None:
    rng = getattr(agent, "rng", None)
    if isinstance(rng, random.Random):
        rng.seed(seed)


def play_headless(agent_x, agent_o, seed_base: int = 0) -> GameRecord:
    """
    Play one game without rendering; X moves first.

    Two random opening plies (seeded by `seed_base`) keep the deterministic
    tiers from replaying the same game. Opening plies are not charged to
    either side's log.
    """
    seed_agent(agent_x, seed_base + 101)
    seed_agent(agent_o, seed_base + 202)

    state = new_game()
    opening = random.Random(seed_base)
    for _ in range(OPENING_PLIES):
        state = apply_turn(state, opening.choice(get_valid_columns(state.board)))

    agents = {PLAYER_ONE: agent_x, PLAYER_TWO: agent_o}
    logs: Dict[int, Dict[str, int]] = {
        p: {"moves": 0, "random_moves": 0, "nodes": 0, "time_ms": 0} for p in agents
    }

    while not state.is_game_over:
        mover = state.current_player
        agent = agents[mover]
        nxt = ai_turn(state, agent)
        if nxt is None:
            break
        state = nxt

        info = getattr(agent, "last_info", None) or {}
        log = logs[mover]
        log["moves"] += 1
        # Depth 0 marks a move picked without searching
        log["random_moves"] += 0 if info.get("depth") else 1
        log["nodes"] += int(info.get("nodes", 0))
        log["time_ms"] += max(1, int(info.get("time_ms", 0)))

    if state.winner is None:
        outcome = "D"
    else:
        outcome = "X" if state.winner == PLAYER_ONE else "O"

    return GameRecord(
        x=agent_x.name,
        o=agent_o.name,
        seed=seed_base,
        outcome=outcome,
        plies=state.move_count,
        x_log=SideLog(**logs[PLAYER_ONE]),
        o_log=SideLog(**logs[PLAYER_TWO]),
    )


def play_pairing(a: Team, b: Team, base_seed: int, games: int) -> List[GameRecord]:
    """`games` games between a and b, colours alternating with a starting as X."""
    out = []
    for g in range(games):
        x, o = (a, b) if g % 2 == 0 else (b, a)
        out.append(play_headless(x.build(), o.build(), seed_base=base_seed + g))
    return out


def run_pairings_batch(args) -> List[GameRecord]:
    (batch, games_per_pair) = args
    out: List[GameRecord] = []
    for (a, b, base_seed) in batch:
        out.extend(play_pairing(a, b, base_seed, games_per_pair))
    return out


def chunked(lst: Sequence, size: int) -> Iterator[List]:
    for i in range(0, len(lst), size):
        yield list(lst[i : i + size])
