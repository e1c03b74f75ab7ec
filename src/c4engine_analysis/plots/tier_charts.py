from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd

from ..metrics.tiers import rank_agents

OUTCOME_COLORS = {"X": "tab:green", "O": "tab:orange", "D": "tab:gray"}


def _finish(fig, outdir: Path, filename: str, *, show: bool):
    if show:
        plt.show()
    else:
        outdir.mkdir(parents=True, exist_ok=True)
        fig.savefig(outdir / filename, dpi=200, bbox_inches="tight")
        plt.close(fig)
    return fig


def plot_head_to_head(h2h: pd.DataFrame, outdir: Path, *, show: bool):
    """Heat map of row-vs-column points per game; 0.5 is an even match."""
    fig, ax = plt.subplots(figsize=(6, 5))
    im = ax.imshow(h2h.to_numpy(dtype=float), cmap="RdYlGn", vmin=0.0, vmax=1.0)

    ax.set_xticks(range(len(h2h.columns)), [str(c) for c in h2h.columns], rotation=45, ha="right")
    ax.set_yticks(range(len(h2h.index)), [str(i) for i in h2h.index])
    for r, row_name in enumerate(h2h.index):
        for c, col_name in enumerate(h2h.columns):
            v = h2h.loc[row_name, col_name]
            if pd.notna(v):
                ax.text(c, r, f"{v:.2f}", ha="center", va="center", fontsize=9)

    ax.set_xlabel("opponent")
    ax.set_ylabel("agent")
    ax.set_title("Head-to-head points per game")
    fig.colorbar(im, ax=ax)
    return _finish(fig, outdir, "head_to_head.png", show=show)


def plot_ranking(summary: pd.DataFrame, metric: str, outdir: Path, *, show: bool):
    """Bars best-first, using the same direction as rank_agents."""
    ranked = rank_agents(summary, metric)

    fig, ax = plt.subplots(figsize=(7, 4))
    ax.bar(range(len(ranked)), ranked[metric].astype(float))
    ax.set_xticks(range(len(ranked)), ranked["agent"].astype(str).tolist())
    if metric == "nodes_per_move" and (ranked[metric] > 0).all():
        ax.set_yscale("log")
    ax.set_title(f"Tiers ranked by {metric}")
    ax.set_ylabel(metric)
    return _finish(fig, outdir, f"rank_{metric}.png", show=show)


def plot_game_lengths(games: pd.DataFrame, outdir: Path, *, show: bool):
    fig, ax = plt.subplots(figsize=(7, 4))

    groups = [(o, games.loc[games["outcome"] == o, "plies"]) for o in OUTCOME_COLORS]
    groups = [(o, s) for o, s in groups if not s.empty]
    if groups:
        ax.hist(
            [s for _, s in groups],
            bins=range(0, 44, 2),
            stacked=True,
            color=[OUTCOME_COLORS[o] for o, _ in groups],
            label=[{"X": "X wins", "O": "O wins", "D": "draw"}[o] for o, _ in groups],
        )
        ax.legend()

    ax.set_title("Game length by outcome")
    ax.set_xlabel("plies")
    ax.set_ylabel("games")
    return _finish(fig, outdir, "game_lengths.png", show=show)
