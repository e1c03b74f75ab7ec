from __future__ import annotations

import argparse
import logging
import random

from c4engine.ai.minimax_agent import MinimaxAgent
from c4engine.config import AI_DEPTH
from c4engine.game.controller import run_game
from c4engine.ui.menu import choose_difficulty


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="c4engine", description="Connect-4 against a minimax AI.")
    ap.add_argument("--log-level", type=str, default="WARNING", help="Logging level (DEBUG, INFO, ...)")

    sub = ap.add_subparsers(dest="cmd")

    play = sub.add_parser("play", help="Play against the AI in the terminal")
    play.add_argument("--difficulty", choices=list(AI_DEPTH), default=None, help="AI tier; prompts if omitted")
    play.add_argument("--seed", type=int, default=None, help="Seed for the easy tier's random moves")
    play.add_argument("--no-delay", action="store_true", help="Skip the 'AI is thinking' pause")

    league = sub.add_parser("league", help="Round-robin between the difficulty tiers")
    league.add_argument("--games", type=int, default=4, help="Games per pairing (colours alternate)")
    league.add_argument("--seed", type=int, default=1234, help="Base seed")
    league.add_argument("--workers", type=int, default=None, help="Worker processes (default: cpu cores, capped at 6)")
    league.add_argument("--out-dir", type=str, default="data/results", help="Directory for league_results_*.csv and league_games_*.csv")
    league.add_argument("--no-csv", action="store_true", help="Skip the CSV export")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "league":
        from c4engine.scripts.league import run_league

        run_league(
            games_per_pair=args.games,
            seed=args.seed,
            max_workers=args.workers,
            out_dir=None if args.no_csv else args.out_dir,
        )
        return 0

    difficulty = getattr(args, "difficulty", None) or choose_difficulty()
    if difficulty is None:
        return 0

    seed = getattr(args, "seed", None)
    agent = MinimaxAgent(difficulty=difficulty, rng=random.Random(seed))
    run_game(difficulty, agent=agent, show_thinking=not getattr(args, "no_delay", False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
