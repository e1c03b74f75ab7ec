from __future__ import annotations

import csv
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence

from c4engine.config import AI_DEPTH

from .league_format import A, clamp, hr, term_width
from .league_play import Pairing, chunked, run_pairings_batch
from .league_scoring import DEFAULT_Z, ranked, strength, tally
from .league_types import GameRecord, Standing, Team

logger = logging.getLogger(__name__)

STANDINGS_COLUMNS = [
    "name", "depth",
    "games", "wins", "draws", "losses",
    "points", "ppg", "strength_wilson_lcb",
    "moves", "random_moves", "nodes", "time_ms",
    "nodes_per_move", "ms_per_move",
]

GAME_COLUMNS = [
    "x", "o", "seed", "outcome", "plies",
    "x_moves", "x_random_moves", "x_nodes", "x_time_ms",
    "o_moves", "o_random_moves", "o_nodes", "o_time_ms",
]


@dataclass
class LeagueRun:
    standings: Dict[str, Standing]
    games: List[GameRecord] = field(default_factory=list)
    standings_csv: Optional[Path] = None
    games_csv: Optional[Path] = None


def build_roster() -> List[Team]:
    return [Team("Random")] + [Team(d.capitalize(), d) for d in AI_DEPTH]  # type: ignore[arg-type]


def pairings(teams: Sequence[Team], seed: int) -> List[Pairing]:
    out = []
    for i, a in enumerate(teams):
        for j in range(i + 1, len(teams)):
            out.append((a, teams[j], seed + i * 10_000 + j * 100))
    return out


@dataclass(frozen=True)
class Col:
    title: str
    width: int
    align: str = "left"  # "left" | "right"


def _fmt_row(values: Sequence[str], cols: Sequence[Col]) -> str:
    out: List[str] = []
    for v, c in zip(values, cols):
        s = clamp(str(v), c.width)
        out.append(s.rjust(c.width) if c.align == "right" else s.ljust(c.width))
    return "  ".join(out)


def print_table(title: str, cols: Sequence[Col], rows: Iterable[Sequence[str]]) -> None:
    w = term_width()
    print(A.cyan(A.bold(title)))
    print(A.dim(_fmt_row([c.title for c in cols], cols)))
    print(A.dim(hr("─", w)))
    for r in rows:
        print(_fmt_row(r, cols))
    print(A.dim(hr("─", w)))


def print_standings(table: Dict[str, Standing], z: float) -> None:
    cols = [
        Col("rk", 3, "right"),
        Col("tier", 10),
        Col("d", 2, "right"),
        Col("strength", 9, "right"),
        Col("ppg", 5, "right"),
        Col("W-D-L", 9, "right"),
        Col("nodes/mv", 9, "right"),
        Col("ms/mv", 7, "right"),
        Col("rand%", 6, "right"),
    ]
    rows = []
    for i, (name, s) in enumerate(ranked(table, z), start=1):
        rand_pct = 100.0 * s.random_moves / s.moves if s.moves else 0.0
        rows.append([
            str(i),
            name,
            str(s.depth),
            f"{strength(s, z):0.4f}",
            f"{s.ppg:0.3f}",
            f"{s.wins}-{s.draws}-{s.losses}",
            f"{s.nodes_per_move:0.0f}",
            f"{s.ms_per_move:0.1f}",
            f"{rand_pct:0.0f}",
        ])
    print_table("Tier standings (Wilson lower bound of points per game)", cols, rows)


def _write_csv(path: Path, header: Sequence[str], rows: Iterable[Sequence]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(header)
        w.writerows(rows)
    return path


def export_standings(table: Dict[str, Standing], path: Path, z: float = DEFAULT_Z) -> Path:
    return _write_csv(path, STANDINGS_COLUMNS, (
        [
            name, s.depth,
            s.games, s.wins, s.draws, s.losses,
            s.points, round(s.ppg, 6), round(strength(s, z), 6),
            s.moves, s.random_moves, s.nodes, s.time_ms,
            round(s.nodes_per_move, 3), round(s.ms_per_move, 3),
        ]
        for name, s in ranked(table, z)
    ))


def export_games(records: Iterable[GameRecord], path: Path) -> Path:
    return _write_csv(path, GAME_COLUMNS, (
        [
            r.x, r.o, r.seed, r.outcome, r.plies,
            r.x_log.moves, r.x_log.random_moves, r.x_log.nodes, r.x_log.time_ms,
            r.o_log.moves, r.o_log.random_moves, r.o_log.nodes, r.o_log.time_ms,
        ]
        for r in records
    ))


def run_league(
    teams: Optional[List[Team]] = None,
    games_per_pair: int = 4,
    seed: int = 1234,
    max_workers: Optional[int] = None,
    batch_pairings: int = 1,
    z: float = DEFAULT_Z,
    out_dir: Optional[str] = "data/results",
) -> LeagueRun:
    """
    Round-robin between `teams` (default: Random plus every difficulty tier).

    With max_workers == 1 the games run in-process; otherwise pairing
    batches go to a process pool. When `out_dir` is set, writes
    league_results_<ts>.csv (standings) and league_games_<ts>.csv (one row
    per game).
    """
    if teams is None:
        teams = build_roster()
    if max_workers is None:
        max_workers = min(os.cpu_count() or 2, 6)

    items = pairings(teams, seed)
    print(A.bold(f"League: {len(teams)} teams, {len(items)} pairings, {games_per_pair} games/pair"))
    print(A.dim(hr("═")))

    records: List[GameRecord] = []

    def collect(batch_records: List[GameRecord]) -> None:
        for r in batch_records:
            logger.info("%s (X) vs %s (O), seed %d: %s in %d plies", r.x, r.o, r.seed, r.outcome, r.plies)
        records.extend(batch_records)

    start = time.perf_counter()
    batches = list(chunked(items, max(1, batch_pairings)))

    if max_workers <= 1:
        for batch in batches:
            collect(run_pairings_batch((batch, games_per_pair)))
    else:
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            futures = [ex.submit(run_pairings_batch, (batch, games_per_pair)) for batch in batches]
            for fut in as_completed(futures):
                collect(fut.result())

    # Pool completion order varies; keep the game log stable.
    records.sort(key=lambda r: (r.seed, r.x, r.o))
    run = LeagueRun(standings=tally(teams, records), games=records)

    print_standings(run.standings, z)
    print(A.dim(f"Elapsed: {time.perf_counter() - start:0.2f}s"))

    if out_dir is not None:
        ts = time.strftime("%Y%m%d_%H%M%S")
        run.standings_csv = export_standings(run.standings, Path(out_dir) / f"league_results_{ts}.csv", z)
        run.games_csv = export_games(records, Path(out_dir) / f"league_games_{ts}.csv")
        print(f"Wrote CSV: {run.standings_csv}")
        print(f"Wrote CSV: {run.games_csv}")

    return run
