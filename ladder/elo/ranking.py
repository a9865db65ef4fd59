"""
Leaderboard ordering for rating snapshots.
"""

from typing import NamedTuple

import pandas as pd


class RankedPlayer(NamedTuple):
    position: int
    player: str
    rating: int


def rank(snapshot) -> list[RankedPlayer]:
    """Order players by rating descending, then name ascending, with 1-based positions."""
    ordered = sorted(snapshot.items(), key=lambda item: (-item[1], item[0]))
    return [RankedPlayer(i + 1, player, rating) for i, (player, rating) in enumerate(ordered)]


def ranking_frame(snapshot) -> pd.DataFrame:
    """Leaderboard as a DataFrame with columns [position, player_name, rating]."""
    df = pd.DataFrame(rank(snapshot), columns=['position', 'player_name', 'rating'])
    return df.astype({'position': int, 'rating': int})
