"""
Leaderboard CLI

Replays a CSV game log and prints the resulting leaderboard.

Usage:
    python -m ladder.cli --path mtgscores.csv
    python -m ladder.cli --path mtgscores.csv --table --window 200
"""

import argparse
import sys

from ladder.config import D_SCALE, DEFAULT_GAMES_CSV, K_FACTOR, REPLAY_WINDOW
from ladder.elo.engine import InvalidGameError
from ladder.elo.ranking import rank, ranking_frame
from ladder.elo.replay import replay
from ladder.ingestion.common import IngestionError
from ladder.ingestion.csv_log import load_csv_games
from ladder.models import RatingConfig
from ladder.utils import setup_logging, silence_logging

# --- Module Logger ---
logger = setup_logging(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compute Elo rankings from a CSV game log.")
    parser.add_argument("--path", default=str(DEFAULT_GAMES_CSV), help="CSV game log to analyze")
    parser.add_argument("--table", action="store_true", help="print the rankings as an aligned table")
    parser.add_argument("--window", type=int, default=REPLAY_WINDOW,
                        help="replay only the most recent N games (0 = all)")
    parser.add_argument("--k", type=float, default=K_FACTOR, help="Elo K-factor")
    parser.add_argument("--d", type=float, default=D_SCALE, help="Elo D-scale")
    parser.add_argument("--skip-header", action="store_true", help="ignore the first CSV record")
    return parser


def format_rankings(snapshot) -> list[str]:
    return [f"{row.position} --- {row.player} --- {row.rating}" for row in rank(snapshot)]


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Keep log lines from interleaving with the table
    if args.table:
        silence_logging()

    logger.info(f"Analyzing scores for {args.path}")
    try:
        config = RatingConfig(k_factor=args.k, d_scale=args.d)
        games = load_csv_games(args.path, skip_header=args.skip_header)
        snapshot = replay(games, config, window=args.window)
    except (IngestionError, InvalidGameError, ValueError) as e:
        logger.error(f"Error processing scores: {e}")
        return 1

    if args.table:
        print(ranking_frame(snapshot).to_string(index=False))
    else:
        for line in format_rankings(snapshot):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
