from __future__ import annotations

from typing import Literal, Optional, Sequence

import pandas as pd


MetricKey = Literal[
    "ppg",
    "wins",
    "nodes_per_move",
    "ms_per_move",
    "random_share",
    "avg_plies",
]

# Search cost and move randomness rank cheapest first
LOWER_IS_BETTER = frozenset({"nodes_per_move", "ms_per_move", "random_share", "avg_plies"})


def _per_move(total: pd.Series, moves: pd.Series) -> pd.Series:
    return (total / moves.where(moves > 0)).fillna(0.0)


def tier_summary(sides: pd.DataFrame) -> pd.DataFrame:
    """One row per agent from the long-form game log (see io.games_csv.per_side)."""
    results = (
        pd.crosstab(sides["agent"], sides["result"])
        .reindex(columns=["W", "D", "L"], fill_value=0)
        .rename(columns={"W": "wins", "D": "draws", "L": "losses"})
    )
    g = sides.groupby("agent")
    totals = g[["points", "moves", "random_moves", "nodes", "time_ms"]].sum()

    out = results.copy()
    out.insert(0, "games", results.sum(axis=1))
    out["ppg"] = totals["points"] / out["games"]
    out["nodes_per_move"] = _per_move(totals["nodes"], totals["moves"])
    out["ms_per_move"] = _per_move(totals["time_ms"], totals["moves"])
    out["random_share"] = _per_move(totals["random_moves"], totals["moves"])
    out["avg_plies"] = g["plies"].mean()
    out.columns.name = None
    return out


def rank_agents(summary: pd.DataFrame, metric: str) -> pd.DataFrame:
    """Best first for `metric`, with a 1-based "rk" column; agent name breaks ties."""
    if metric not in summary.columns:
        raise ValueError(f"Unknown metric {metric!r}. Choose from: {list(summary.columns)}")

    ascending = metric in LOWER_IS_BETTER
    out = summary.rename_axis("agent").reset_index()
    out = out.sort_values([metric, "agent"], ascending=[ascending, True], kind="stable")
    out = out.reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def head_to_head(sides: pd.DataFrame, order: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """Points per game of each row agent against each column agent (NaN on the diagonal)."""
    table = sides.pivot_table(index="agent", columns="opponent", values="points", aggfunc="mean")
    names = list(order) if order is not None else sorted(set(table.index) | set(table.columns))
    table = table.reindex(index=names, columns=names)
    table.index.name = None
    table.columns.name = None
    return table


def seat_split(games: pd.DataFrame) -> pd.Series:
    """Share of games won by X (first to move), won by O, and drawn."""
    return (
        games["outcome"]
        .value_counts(normalize=True)
        .reindex(["X", "O", "D"], fill_value=0.0)
        .rename({"X": "x_wins", "O": "o_wins", "D": "draws"})
    )


def plies_by_pairing(games: pd.DataFrame) -> pd.DataFrame:
    pairing = [" v ".join(sorted(pair)) for pair in zip(games["x"], games["o"])]
    return (
        games.assign(pairing=pairing)
        .groupby("pairing")["plies"]
        .agg(["count", "mean", "min", "max"])
    )
