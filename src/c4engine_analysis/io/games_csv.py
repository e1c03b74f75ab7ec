from __future__ import annotations

from pathlib import Path

import pandas as pd

from c4engine.scripts.league import GAME_COLUMNS

OUTCOMES = ("X", "O", "D")
_COUNT_COLS = [c for c in GAME_COLUMNS if c not in ("x", "o", "outcome")]
_SIDE_STATS = ("moves", "random_moves", "nodes", "time_ms")


def latest_games_csv(results_dir: Path, pattern: str = "league_games_*.csv") -> Path:
    if not results_dir.is_dir():
        raise FileNotFoundError(f"Results directory not found: {results_dir}")
    # Timestamped names sort chronologically
    files = sorted(results_dir.glob(pattern))
    if not files:
        raise FileNotFoundError(f"No files matching {pattern} in {results_dir}")
    return files[-1]


def load_games(csv_path: Path) -> pd.DataFrame:
    """Read a league game log, one row per game, with integer counters."""
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV not found: {csv_path}")

    df = pd.read_csv(csv_path, dtype={"x": str, "o": str, "outcome": str})
    missing = [c for c in GAME_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{csv_path.name} is not a league game log; missing {missing}")

    bad = ~df["outcome"].isin(OUTCOMES)
    if bad.any():
        raise ValueError(f"Unknown outcome(s) {sorted(df.loc[bad, 'outcome'].astype(str).unique())} in {csv_path.name}")

    df[_COUNT_COLS] = df[_COUNT_COLS].apply(pd.to_numeric, errors="raise").astype("int64")
    return df[GAME_COLUMNS]


def per_side(games: pd.DataFrame) -> pd.DataFrame:
    """
    Long form: two rows per game, one from each player's seat, with the
    seat's own result ("W"/"D"/"L"), points and search counters.
    """
    parts = []
    for me, them in (("x", "o"), ("o", "x")):
        part = pd.DataFrame({
            "agent": games[me],
            "opponent": games[them],
            "side": me.upper(),
            "plies": games["plies"],
            **{stat: games[f"{me}_{stat}"] for stat in _SIDE_STATS},
        })
        part["result"] = "D"
        part.loc[games["outcome"] == me.upper(), "result"] = "W"
        part.loc[games["outcome"] == them.upper(), "result"] = "L"
        parts.append(part)

    sides = pd.concat(parts, ignore_index=True)
    sides["points"] = sides["result"].map({"W": 1.0, "D": 0.5, "L": 0.0})
    return sides
