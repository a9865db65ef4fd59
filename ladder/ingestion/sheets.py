"""
Google Sheets Game Log

Fetches the ranked game log from a Google Sheet through the Sheets v4 values
API and converts the rows into Game records.

Sheet layout (row 0 is a header):
    A: game id | B: date (RFC 1123) | C: table zap | D: draw game | E: notes
    F onwards: finishing order, winner first

Usage:
    from ladder.ingestion.sheets import fetch_games
    games = fetch_games()  # needs SCOREBOARD_API_KEY in the environment
"""

import os
from urllib.parse import quote

import requests

from ladder.config import (
    REQUEST_TIMEOUT,
    SHEET_FIRST_PLAYER_COLUMN,
    SHEET_MIN_COLUMNS,
    SHEET_RANGE,
    SHEETS_API_KEY_ENV,
    SHEETS_API_URL,
    SPREADSHEET_ID,
)
from ladder.ingestion.common import (
    IngestionError,
    collect_rankings,
    is_usable,
    parse_timestamp,
    sort_chronologically,
)
from ladder.models import Game
from ladder.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class SheetsError(IngestionError):
    """Raised when the game log cannot be fetched from Google Sheets"""
    pass


def build_values_url(spreadsheet_id: str = SPREADSHEET_ID, sheet_range: str = SHEET_RANGE) -> str:
    """Build the values endpoint URL for a spreadsheet range."""
    return SHEETS_API_URL.format(
        spreadsheet_id=spreadsheet_id,
        sheet_range=quote(sheet_range, safe=""),
    )


def fetch_sheet_values(
    spreadsheet_id: str = SPREADSHEET_ID,
    sheet_range: str = SHEET_RANGE,
    api_key: str | None = None,
    session: requests.Session | None = None,
    timeout: float = REQUEST_TIMEOUT,
) -> list[list]:
    """
    Retrieve the raw cell values of a sheet range.

    Raises:
        SheetsError: On network/HTTP failure, a malformed response, or an
            empty sheet
    """
    api_key = api_key if api_key is not None else os.environ.get(SHEETS_API_KEY_ENV, "")
    session = session or requests.Session()
    url = build_values_url(spreadsheet_id, sheet_range)

    try:
        response = session.get(url, params={"key": api_key}, timeout=timeout)
        response.raise_for_status()
        payload = response.json()
    except requests.RequestException as e:
        raise SheetsError(f"unable to retrieve data from sheet: {e}") from e
    except ValueError as e:
        raise SheetsError(f"sheet response was not JSON: {e}") from e

    values = payload.get("values") if isinstance(payload, dict) else None
    if not values:
        raise SheetsError("no game data found")

    logger.debug(f"Fetched {len(values)} rows from {sheet_range}")
    return values


def parse_sheet_rows(values: list[list]) -> list[Game]:
    """
    Convert raw sheet rows into Game records, in sheet order.

    Skips the header row, rows shorter than SHEET_MIN_COLUMNS, rows naming a
    grouped "A/B" entry and rows with fewer than two players. Blank player
    cells are ignored.
    """
    games = []
    for idx, row in enumerate(values):
        if idx == 0 or len(row) < SHEET_MIN_COLUMNS:
            continue

        game_id, date, zap, draw = (str(cell) for cell in row[:SHEET_MIN_COLUMNS])
        rankings = collect_rankings(row[SHEET_FIRST_PLAYER_COLUMN:], stop_at_blank=False)
        if rankings is None:
            logger.debug(f"Skipping team game {game_id}")
            continue
        if not is_usable(rankings):
            continue

        games.append(Game(
            players=rankings,
            timestamp=parse_timestamp(date),
            game_id=game_id,
            date=date,
            table_zap=zap,
            draw_game=draw,
        ))

    return games


def fetch_games(**kwargs) -> list[Game]:
    """Fetch, parse and chronologically order the sheet's games (oldest first)."""
    games = sort_chronologically(parse_sheet_rows(fetch_sheet_values(**kwargs)))
    logger.info(f"Fetched {len(games)} games from Google Sheets")
    return games
