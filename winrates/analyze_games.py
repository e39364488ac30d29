"""
Report a chess.com player's best openings by win rate.

Reads the opening index written by ``generate-data``, fetches the player's
last six months of games, and prints the ten best-scoring openings with
each colour among those played more than fifteen times.

Usage:
    analyze-openings USERNAME [--data-dir DIR] [--months N] [--min-games N] [--top N] [--output FILE]
"""

import argparse
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from openingbook.lookup import EPD_LOOKUP_FILE, OpeningIndex
from openingbook.stats import analyze_games

from .config import ARCHIVE_MONTHS, DATA_DIR, MIN_GAMES, TOP_N, configure_logging
from .fetch_user_games import fetch_user_games

logger = logging.getLogger(__name__)


def analyze_player(
    username: str,
    index: OpeningIndex,
    months: int = ARCHIVE_MONTHS,
    min_games: int = MIN_GAMES,
    top_n: int = TOP_N
) -> Dict[str, List[str]]:
    games = fetch_user_games(username, index, months=months)
    return analyze_games(username, games, min_games=min_games, top_n=top_n)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Win rates per opening for a chess.com player."
    )
    parser.add_argument("username", help="chess.com handle to analyze")
    parser.add_argument(
        "--data-dir", type=Path, default=DATA_DIR,
        help=f"Directory holding {EPD_LOOKUP_FILE}. Default: {DATA_DIR}"
    )
    parser.add_argument(
        "--months", type=int, default=ARCHIVE_MONTHS,
        help=f"Number of recent monthly archives to read. Default: {ARCHIVE_MONTHS}"
    )
    parser.add_argument(
        "--min-games", type=int, default=MIN_GAMES,
        help=f"Only list openings played more than this many times. Default: {MIN_GAMES}"
    )
    parser.add_argument(
        "--top", type=int, default=TOP_N, help=f"Openings listed per colour. Default: {TOP_N}"
    )
    parser.add_argument("--output", type=Path, help="Also write the summary JSON to this file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    index = OpeningIndex.load(args.data_dir / EPD_LOOKUP_FILE)
    summary = analyze_player(
        args.username,
        index,
        months=args.months,
        min_games=args.min_games,
        top_n=args.top
    )

    report = json.dumps(summary, indent=2, ensure_ascii=False)
    print(report)

    if args.output:
        args.output.write_text(report, encoding='utf-8')
        logger.info(f"Summary written to {args.output}")


if __name__ == "__main__":
    main()
