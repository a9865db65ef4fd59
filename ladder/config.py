"""
Central configuration for the Ladder score system.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

from pathlib import Path

# --- Project Paths ---
PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_GAMES_CSV = PROJECT_ROOT / "mtgscores.csv"

# --- Elo System Configuration ---
BASELINE_RATING = 1500  # Starting rating for every unseen player
K_FACTOR = 40  # Maximum swing of a single pairwise comparison
D_SCALE = 800  # Rating gap that makes a win ~10x more likely than a loss

# Trailing window of games to replay (0 = replay the full history)
REPLAY_WINDOW = 0

# --- Game Source Configuration ---
TEAM_MARKER = "/"  # "Alice/Bob" marks a grouped (two-headed giant) entry
MIN_PLAYERS_PER_GAME = 2

# CSV game log: id, date, then the finishing order
CSV_FIRST_PLAYER_COLUMN = 2

# Google Sheets game log
SPREADSHEET_ID = "1-qr-ejHx07Hrr35OymMcGRH00-Jzb-k8S8-xS9P5vqk"
SHEET_RANGE = "Ranked game log!A:K"
SHEETS_API_URL = "https://sheets.googleapis.com/v4/spreadsheets/{spreadsheet_id}/values/{sheet_range}"
SHEETS_API_KEY_ENV = "SCOREBOARD_API_KEY"
SHEET_MIN_COLUMNS = 4
SHEET_FIRST_PLAYER_COLUMN = 5
REQUEST_TIMEOUT = 15  # seconds

# --- Presentation ---
RECENT_GAMES_LIMIT = 10
SERVER_HOST = "127.0.0.1"
SERVER_PORT = 8080

# --- Input Validation ---
MAX_INPUT_SIZE = 5_000_000  # Maximum game log size in bytes (~5MB)
