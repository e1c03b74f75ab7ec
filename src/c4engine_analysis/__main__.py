from __future__ import annotations

import sys

from .cli.report import main as report_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    # `report` is the only command; accept it spelled out
    if argv and argv[0].lower() == "report":
        argv = argv[1:]

    if argv and not argv[0].startswith("-"):
        print("Usage:")
        print("  python -m c4engine_analysis [report] [--csv league_games_*.csv] [--metric ppg]")
        return 2

    return report_main(argv)


if __name__ == "__main__":
    raise SystemExit(main())
