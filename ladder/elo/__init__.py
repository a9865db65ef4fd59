"""
Elo Rating System

Modules:
- engine: Pairwise Elo deltas for a single game
- replay: Fold an ordered game history into a rating snapshot
- store: Concurrency-guarded published snapshot
- ranking: Deterministic leaderboard ordering
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name in ("compute_deltas", "InvalidGameError"):
        from ladder.elo import engine
        return getattr(engine, name)
    if name == "replay_history":
        from ladder.elo.replay import replay_history
        return replay_history
    if name == "ScoreStore":
        from ladder.elo.store import ScoreStore
        return ScoreStore
    if name in ("rank", "ranking_frame"):
        from ladder.elo import ranking
        return getattr(ranking, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
