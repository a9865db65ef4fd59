"""
CSV Game Log Reader

Reads a local CSV game log where each record is:

    game_id, date, first place, second place, ...

Records are ragged (games have different player counts), so they are read
with the csv module rather than a rectangular DataFrame reader.

Usage:
    from ladder.ingestion.csv_log import load_csv_games
    games = load_csv_games(Path("mtgscores.csv"))
"""

import csv
from pathlib import Path

from ladder.config import CSV_FIRST_PLAYER_COLUMN, MAX_INPUT_SIZE
from ladder.ingestion.common import (
    ValidationError,
    collect_rankings,
    is_usable,
    parse_timestamp,
)
from ladder.models import Game
from ladder.utils import setup_logging, validate_input_size

# --- Module Logger ---
logger = setup_logging(__name__)


def parse_csv_record(record: list[str]) -> Game | None:
    """
    Parse one CSV record into a Game.

    The finishing order ends at the first blank cell. Returns None for
    records that cannot become a game: too few columns, fewer than two
    names, or a grouped "A/B" entry.
    """
    if len(record) <= CSV_FIRST_PLAYER_COLUMN:
        return None

    rankings = collect_rankings(record[CSV_FIRST_PLAYER_COLUMN:], stop_at_blank=True)
    if not is_usable(rankings):
        return None

    date = record[1].strip()
    return Game(
        players=rankings,
        timestamp=parse_timestamp(date),
        game_id=record[0].strip(),
        date=date,
    )


def load_csv_games(path: Path, skip_header: bool = False) -> list[Game]:
    """
    Read every usable game from a CSV log, in file order.

    Args:
        path: CSV file to read
        skip_header: Ignore the first record

    Returns:
        List of Game records

    Raises:
        ValidationError: If the file is missing, too large or not valid CSV
    """
    path = Path(path)
    if not path.exists():
        raise ValidationError(f"Game log not found: {path}")

    try:
        validate_input_size(path, MAX_INPUT_SIZE)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    games = []
    dropped = 0
    try:
        with open(path, newline='', encoding='utf-8') as f:
            reader = csv.reader(f)
            for line_no, record in enumerate(reader, start=1):
                if skip_header and line_no == 1:
                    continue
                game = parse_csv_record(record)
                if game is None:
                    dropped += 1
                    logger.debug(f"Dropped record {line_no}: {record}")
                    continue
                games.append(game)
    except (csv.Error, UnicodeDecodeError) as e:
        raise ValidationError(f"Could not read game log {path}: {e}") from e

    logger.info(f"Loaded {len(games)} games from {path} ({dropped} records dropped)")
    return games
