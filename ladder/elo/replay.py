"""
Game History Replay

Folds a chronologically ordered game history into a rating snapshot by
running the rating engine once per game. Elo is path dependent, so the
order of the input matters; sorting is the caller's job.

Usage:
    from ladder.elo.replay import replay
    snapshot = replay(games, RatingConfig(), window=200)
"""

import pandas as pd

from ladder.config import BASELINE_RATING, MIN_PLAYERS_PER_GAME
from ladder.elo.engine import compute_deltas
from ladder.models import Game, RatingConfig, players_of
from ladder.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

HISTORY_COLUMNS = [
    'game_index', 'game_id', 'timestamp', 'player_name', 'position',
    'rating_before', 'rating_change', 'rating',
]


def select_window(games, window=None):
    """
    Return the games a replay should see.

    A positive window smaller than the history keeps only the most recent
    `window` games; None or 0 keeps everything.
    """
    games = list(games)
    if window is None or window == 0:
        return games
    if window < 0:
        raise ValueError(f"window must be zero or positive, got {window}")
    if len(games) > window:
        return games[-window:]
    return games


def is_scorable(players) -> bool:
    """Rows with fewer than two distinct players are source noise, not engine errors."""
    return len(set(players)) >= MIN_PLAYERS_PER_GAME


def _iter_scored_games(games, config, window, seed):
    """
    Shared replay loop. Folds each scored game into a working snapshot and
    yields (index, game, ratings_before, deltas, snapshot). The yielded
    snapshot is the live working dict; callers must copy it to keep it.
    """
    snapshot = dict(seed) if seed else {}
    selected = select_window(games, window)

    skipped = 0
    for index, game in enumerate(selected):
        players = players_of(game)
        if not is_scorable(players):
            skipped += 1
            logger.debug(f"Skipping game {index} with fewer than {MIN_PLAYERS_PER_GAME} players: {players}")
            continue

        deltas = compute_deltas(snapshot, players, config)
        before = {player: snapshot.get(player, BASELINE_RATING) for player in players}
        for player, delta in deltas.items():
            snapshot[player] = before[player] + delta

        yield index, game, before, deltas, snapshot

    if skipped:
        logger.info(f"Skipped {skipped} of {len(selected)} games with too few players")


def replay(games, config: RatingConfig | None = None, window: int | None = None, seed=None) -> dict[str, int]:
    """
    Replay an ordered game history and return the resulting snapshot.

    Args:
        games: Games (or sequences of player names), oldest first
        config: K-factor and D-scale (default: RatingConfig())
        window: Replay only the most recent `window` games (None/0 = all)
        seed: Optional starting ratings; copied, never modified

    Returns:
        A fresh dict of player_name -> rating

    Raises:
        InvalidGameError: If any scorable game repeats a player. The replay is
            abandoned; no partial snapshot is returned.
    """
    config = config or RatingConfig()
    snapshot = dict(seed) if seed else {}
    scored = 0

    for _, _, _, _, snapshot in _iter_scored_games(games, config, window, seed):
        scored += 1

    logger.info(f"Replayed {scored} games, {len(snapshot)} unique players")
    return dict(snapshot)


def replay_history(games, config: RatingConfig | None = None, window: int | None = None) -> pd.DataFrame:
    """
    Replay a game history and record every rating change along the way.

    Returns:
        DataFrame with one row per (game, participant) and columns
        HISTORY_COLUMNS. `position` is 1 for the winner.
    """
    config = config or RatingConfig()
    rows = []

    for index, game, before, deltas, snapshot in _iter_scored_games(games, config, window, None):
        is_game = isinstance(game, Game)
        for position, player in enumerate(players_of(game), start=1):
            rows.append({
                'game_index': index,
                'game_id': game.game_id if is_game else str(index),
                'timestamp': game.timestamp if is_game else None,
                'player_name': player,
                'position': position,
                'rating_before': before[player],
                'rating_change': deltas[player],
                'rating': snapshot[player],
            })

    return pd.DataFrame(rows, columns=HISTORY_COLUMNS)
