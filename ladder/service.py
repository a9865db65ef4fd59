"""
Leaderboard Service

Glue between a game source, the replay engine and the published score store.
A refresh recomputes the whole snapshot from source data and publishes it
atomically; if anything fails, the previously published snapshot stays.
"""

import threading
from collections.abc import Callable

from ladder.config import RECENT_GAMES_LIMIT, REPLAY_WINDOW
from ladder.elo.ranking import rank
from ladder.elo.replay import replay
from ladder.elo.store import ScoreStore
from ladder.ingestion.common import IngestionError, most_recent
from ladder.models import Game, RatingConfig
from ladder.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class LeaderboardService:
    """Owns the published ScoreStore and knows how to rebuild it."""

    def __init__(
        self,
        source: Callable[[], list[Game]],
        config: RatingConfig | None = None,
        window: int | None = REPLAY_WINDOW,
        store: ScoreStore | None = None,
    ):
        self.source = source
        self.config = config or RatingConfig()
        self.window = window
        self.store = store if store is not None else ScoreStore()
        self._refresh_lock = threading.Lock()

    def refresh(self) -> dict[str, int]:
        """
        Recompute scores from the source and publish them.

        Overlapping refreshes run one at a time. Errors from the source or
        the replay propagate; the store is only touched on success.

        Returns:
            The newly published snapshot
        """
        with self._refresh_lock:
            games = self.source()
            snapshot = replay(games, self.config, window=self.window)
            self.store.replace_all(snapshot)
        logger.info(f"Published scores for {len(snapshot)} players from {len(games)} games")
        return dict(snapshot)

    def scores(self) -> dict[str, int]:
        return self.store.get_all()

    def leaderboard(self):
        return rank(self.store.get_all())

    def recent_games(self, limit: int = RECENT_GAMES_LIMIT) -> list[Game]:
        """Newest games first; an unavailable source yields an empty list."""
        try:
            games = self.source()
        except IngestionError as e:
            logger.warning(f"Could not load recent games: {e}")
            return []
        return most_recent(games, limit)
