"""
Ladder - Pairwise Elo Leaderboard

This package contains the modules for:
- Elo rating computation, replay and the published score store (ladder.elo)
- Game log ingestion from CSV files and Google Sheets (ladder.ingestion)
- The leaderboard service, HTTP server and CLI
- Shared configuration and utilities
"""

from ladder.config import *
