from __future__ import annotations

import math
from typing import Dict, Iterable, Sequence

from .league_types import GameRecord, Standing, Team

# One-sided 90% confidence
DEFAULT_Z = 1.28

_RESULT = {
    # outcome -> (X's result, O's result)
    "X": ("W", "L"),
    "O": ("L", "W"),
    "D": ("D", "D"),
}


def wilson_lcb(p: float, n: int, z: float = DEFAULT_Z) -> float:
    """Wilson score lower bound for a rate `p` observed over `n` games."""
    if n <= 0:
        return 0.0
    p = min(1.0, max(0.0, p))
    spread = z * math.sqrt(p * (1.0 - p) / n + z * z / (4.0 * n * n))
    bound = (p + z * z / (2.0 * n) - spread) / (1.0 + z * z / n)
    return max(0.0, bound)


def strength(s: Standing, z: float = DEFAULT_Z) -> float:
    return wilson_lcb(s.ppg, s.games, z)


def tally(teams: Sequence[Team], records: Iterable[GameRecord]) -> Dict[str, Standing]:
    table = {t.name: Standing(depth=t.depth) for t in teams}
    for rec in records:
        x_result, o_result = _RESULT[rec.outcome]
        table[rec.x].add_game(x_result, rec.x_log)
        table[rec.o].add_game(o_result, rec.o_log)
    return table


def ranked(table: Dict[str, Standing], z: float = DEFAULT_Z):
    """(name, standing) pairs, strongest first; ties go to the cheaper search."""
    return sorted(table.items(), key=lambda kv: (-strength(kv[1], z), kv[1].nodes_per_move))
