"""
Game Log Ingestion

Modules:
- common: Shared row cleaning, ordering and errors
- csv_log: Read a local CSV game log
- sheets: Fetch the ranked game log from Google Sheets
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "load_csv_games":
        from ladder.ingestion.csv_log import load_csv_games
        return load_csv_games
    if name == "fetch_games":
        from ladder.ingestion.sheets import fetch_games
        return fetch_games
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
