"""
Elo Rating Engine

This module turns the finishing order of one multi-player game into rating
deltas using a pairwise comparison model:
- Every pair of participants is treated as a two-player game won by whoever
  finished higher
- Expected scores come from the pre-game ratings of a single snapshot
- All pairwise contributions are summed before any rating moves, so the
  result does not depend on the order pairs are visited

Usage:
    from ladder.elo.engine import compute_deltas
    deltas = compute_deltas(snapshot, ["Alice", "Bob", "Carol"])
"""

import math
from collections import defaultdict
from collections.abc import Mapping, Sequence

from ladder.config import BASELINE_RATING, MIN_PLAYERS_PER_GAME
from ladder.models import RatingConfig, players_of
from ladder.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class InvalidGameError(ValueError):
    """Raised when a game cannot be scored (too few or repeated players)."""
    pass


def expected_score(rating_a, rating_b, d_scale):
    """Calculate expected probability of player A beating player B"""
    return 1 / (1 + 10 ** ((rating_b - rating_a) / d_scale))


def round_half_away(value):
    """Round to the nearest integer, sending exact halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def validate_game(game: Sequence[str]) -> None:
    """
    Check that a finishing order can be scored.

    Raises:
        InvalidGameError: If fewer than two players took part, or if the same
            player appears more than once.
    """
    if len(game) < MIN_PLAYERS_PER_GAME:
        raise InvalidGameError(
            f"invalid game: need at least {MIN_PLAYERS_PER_GAME} players, got {len(game)}"
        )

    seen = set()
    for player in game:
        if player in seen:
            raise InvalidGameError(f"invalid game: player {player!r} appears more than once")
        seen.add(player)


def pairwise_contributions(ratings, game, config):
    """
    Accumulate the raw (unrounded) pairwise deltas for one game.

    Player i finished ahead of player j whenever i < j, so i is credited with
    the win in every pair it leads.
    """
    pre_game = [ratings.get(player, BASELINE_RATING) for player in game]
    totals = defaultdict(float)

    for i in range(len(game)):
        for j in range(i + 1, len(game)):
            e_i = expected_score(pre_game[i], pre_game[j], config.d_scale)
            delta = config.k_factor * (1 - e_i)
            totals[game[i]] += delta
            totals[game[j]] -= delta

    return totals


def compute_deltas(ratings: Mapping[str, int], game, config: RatingConfig | None = None) -> dict[str, int]:
    """
    Compute integer rating deltas for every participant of a finished game.

    Args:
        ratings: Snapshot of current ratings; players missing from it are
            treated as BASELINE_RATING. It is never modified.
        game: A Game, or a sequence of player names ordered winner first
        config: K-factor and D-scale (default: RatingConfig())

    Returns:
        Dict of player_name -> signed integer delta. Deltas sum to zero up to
        per-player rounding.

    Raises:
        InvalidGameError: If the game has fewer than two players or repeats one
    """
    config = config or RatingConfig()
    players = players_of(game)
    validate_game(players)

    totals = pairwise_contributions(ratings, players, config)
    deltas = {player: round_half_away(totals[player]) for player in players}
    logger.debug(f"Scored game {players}: {deltas}")
    return deltas
