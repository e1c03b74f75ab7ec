from __future__ import annotations

import argparse
from pathlib import Path
from typing import get_args

from ..io.games_csv import latest_games_csv, load_games, per_side
from ..metrics.tiers import MetricKey, head_to_head, plies_by_pairing, rank_agents, seat_split, tier_summary
from ..plots.tier_charts import plot_game_lengths, plot_head_to_head, plot_ranking


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Report on a Connect-4 tier league game log.")
    ap.add_argument("--csv", type=str, default=None, help="Path to a league_games_*.csv. If omitted, uses latest in --results-dir.")
    ap.add_argument("--results-dir", type=str, default="data/results", help="Directory written by `c4engine league`")
    ap.add_argument("--metric", choices=get_args(MetricKey), default="ppg", help="Ranking metric")

    ap.add_argument("--outdir", type=str, default="data/figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = Path(args.csv) if args.csv else latest_games_csv(Path(args.results_dir))
    games = load_games(csv_path)
    sides = per_side(games)
    summary = tier_summary(sides)
    ranked = rank_agents(summary, args.metric)

    print(f"\nLoaded: {csv_path}  ({len(games):,} games)")

    print(f"\n=== Tiers by {args.metric} ===")
    print(ranked.to_string(index=False, float_format=lambda v: f"{v:0.3f}"))

    print("\n=== Head-to-head (row points per game) ===")
    h2h = head_to_head(sides, order=ranked["agent"].tolist())
    print(h2h.to_string(float_format=lambda v: f"{v:0.2f}", na_rep="-"))

    split = seat_split(games)
    print(
        f"\nFirst mover: X won {split['x_wins']:.1%}, "
        f"O won {split['o_wins']:.1%}, drawn {split['draws']:.1%}"
    )

    print("\n=== Game length by pairing (plies) ===")
    print(plies_by_pairing(games).to_string(float_format=lambda v: f"{v:0.1f}"))

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    plot_head_to_head(h2h, outdir, show=args.show)
    plot_ranking(summary, args.metric, outdir, show=args.show)
    plot_game_lengths(games, outdir, show=args.show)

    if not args.show:
        print(f"\nSaved figures to: {outdir.resolve()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
