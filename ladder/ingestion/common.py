"""
Shared helpers for turning raw game log rows into Game records.
"""

from datetime import datetime, timezone

import pandas as pd

from ladder.config import MIN_PLAYERS_PER_GAME
from ladder.models import Game
from ladder.utils import clean_player_name, is_team_entry

# Games without a parseable timestamp sort before everything else
_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


class IngestionError(Exception):
    """Custom exception for ingestion errors"""
    pass


class ValidationError(IngestionError):
    """Validation-specific errors"""
    pass


def parse_timestamp(text) -> datetime | None:
    """
    Parse a game date (RFC 1123 from the sheet, or anything pandas reads).

    Returns:
        A timezone-aware UTC datetime, or None if the text is not a date
    """
    if text is None or not str(text).strip():
        return None
    ts = pd.to_datetime(str(text).strip(), errors="coerce", utc=True)
    if pd.isna(ts):
        return None
    return ts.to_pydatetime()


def collect_rankings(cells, stop_at_blank: bool) -> list[str] | None:
    """
    Turn a row's player cells into a finishing order.

    Args:
        cells: Raw cell values, winner first
        stop_at_blank: End the list at the first blank cell (CSV logs) instead
            of skipping blanks (the sheet)

    Returns:
        List of trimmed names, or None if the row names a grouped entry
    """
    rankings = []
    for cell in cells:
        name = clean_player_name(cell)
        if not name:
            if stop_at_blank:
                break
            continue
        if is_team_entry(name):
            return None
        rankings.append(name)
    return rankings


def is_usable(rankings) -> bool:
    return rankings is not None and len(rankings) >= MIN_PLAYERS_PER_GAME


def sort_chronologically(games: list[Game]) -> list[Game]:
    """Stable ascending sort by timestamp; rows without one keep source order up front."""
    return sorted(games, key=lambda g: g.timestamp or _EARLIEST)


def most_recent(games: list[Game], limit: int) -> list[Game]:
    """Newest games first, at most `limit` of them."""
    return sort_chronologically(games)[::-1][:limit]


def games_frame(games: list[Game]) -> pd.DataFrame:
    """Games as a DataFrame for tables: one row per game, finishing order joined."""
    rows = [{
        'game_id': g.game_id,
        'date': g.date,
        'timestamp': g.timestamp,
        'players': len(g.players),
        'winner': g.players[0] if g.players else "",
        'finishing_order': " > ".join(g.players),
    } for g in games]
    return pd.DataFrame(rows, columns=['game_id', 'date', 'timestamp', 'players', 'winner', 'finishing_order'])
