"""
Shared data types for games and rating configuration.
"""

from dataclasses import dataclass
from datetime import datetime

from ladder.config import D_SCALE, K_FACTOR
from ladder.utils import validate_positive


@dataclass(frozen=True)
class RatingConfig:
    """Tuning constants for one deployment; never changes mid-replay."""

    k_factor: float = K_FACTOR
    d_scale: float = D_SCALE

    def __post_init__(self):
        validate_positive(self.k_factor, "k_factor")
        validate_positive(self.d_scale, "d_scale")


@dataclass(frozen=True)
class Game:
    """
    One finished game.

    `players` is the finishing order, winner first. `timestamp` is only used
    to put games in chronological order before a replay; the remaining fields
    are carried through from the source for display.
    """

    players: tuple[str, ...]
    timestamp: datetime | None = None
    game_id: str = ""
    date: str = ""
    table_zap: str = ""
    draw_game: str = ""

    def __post_init__(self):
        # Accept any sequence of names but always store a tuple
        object.__setattr__(self, "players", tuple(self.players))

    def to_dict(self) -> dict:
        return {
            "id": self.game_id,
            "date": self.date,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
            "rankings": list(self.players),
            "table_zap": self.table_zap,
            "draw_game": self.draw_game,
        }


def players_of(game) -> tuple[str, ...]:
    """Return the finishing order of a Game or of a plain sequence of names."""
    if isinstance(game, Game):
        return game.players
    return tuple(game)
