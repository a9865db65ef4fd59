"""
Tests for replaying a game history into a rating snapshot.
"""

import pytest

from ladder.elo.engine import InvalidGameError
from ladder.elo.replay import HISTORY_COLUMNS, replay, replay_history, select_window
from ladder.models import Game, RatingConfig


CONFIG = RatingConfig(k_factor=40, d_scale=800)

HISTORY = [
    ["A", "B"],
    ["B", "C", "A"],
    ["C", "A"],
    ["A", "D", "B", "C"],
    ["D", "B"],
]


class TestReplay:
    """Tests for replay function."""

    def test_single_game(self):
        assert replay([["A", "B"]], CONFIG) == {"A": 1520, "B": 1480}

    def test_three_player_game(self):
        assert replay([["A", "B", "C"]], CONFIG) == {"A": 1540, "B": 1500, "C": 1460}

    def test_empty_history(self):
        assert replay([], CONFIG) == {}

    def test_deterministic(self):
        assert replay(HISTORY, CONFIG) == replay(HISTORY, CONFIG)

    def test_order_can_matter(self):
        x = ["A", "B"]
        y = ["B", "C"]
        forward = replay([x, y], CONFIG)
        backward = replay([y, x], CONFIG)
        assert forward == {"A": 1520, "B": 1501, "C": 1479}
        assert backward == {"A": 1521, "B": 1499, "C": 1480}
        assert forward != backward

    def test_accepts_game_records(self):
        games = [Game(players=p, game_id=str(i)) for i, p in enumerate(HISTORY)]
        assert replay(games, CONFIG) == replay(HISTORY, CONFIG)

    def test_skips_games_with_too_few_players(self):
        games = [["A"], [], ["A", "B"], ["C", "C"]]
        assert replay(games, CONFIG) == {"A": 1520, "B": 1480}

    def test_repeated_player_aborts_replay(self):
        with pytest.raises(InvalidGameError):
            replay([["A", "B"], ["A", "B", "A"]], CONFIG)

    def test_seed_is_used_and_not_modified(self):
        seed = {"A": 1600, "B": 1500}
        result = replay([["A", "B"]], CONFIG, seed=seed)
        assert result == {"A": 1617, "B": 1483}
        assert seed == {"A": 1600, "B": 1500}

    def test_returns_fresh_snapshot(self):
        first = replay(HISTORY, CONFIG)
        first["A"] = 0
        assert replay(HISTORY, CONFIG)["A"] != 0


class TestWindow:
    """Tests for trailing-window replays."""

    def test_window_equals_trailing_slice(self):
        assert replay(HISTORY, CONFIG, window=2) == replay(HISTORY[-2:], CONFIG, window=0)

    def test_window_resets_to_baseline(self):
        # Only the last game counts, so D and B start fresh at 1500
        assert replay(HISTORY, CONFIG, window=1) == {"D": 1520, "B": 1480}

    def test_window_larger_than_history(self):
        assert replay(HISTORY, CONFIG, window=50) == replay(HISTORY, CONFIG)

    def test_zero_and_none_mean_everything(self):
        assert replay(HISTORY, CONFIG, window=0) == replay(HISTORY, CONFIG, window=None)

    def test_negative_window_rejected(self):
        with pytest.raises(ValueError):
            select_window(HISTORY, -1)


class TestReplayHistory:
    """Tests for replay_history function."""

    def test_one_row_per_participant(self):
        df = replay_history(HISTORY, CONFIG)
        assert list(df.columns) == HISTORY_COLUMNS
        assert len(df) == sum(len(g) for g in HISTORY)

    def test_final_ratings_match_replay(self):
        df = replay_history(HISTORY, CONFIG)
        final = df.sort_values('game_index').groupby('player_name')['rating'].last().to_dict()
        assert final == replay(HISTORY, CONFIG)

    def test_first_game_values(self):
        df = replay_history([["A", "B"]], CONFIG)
        winner = df[df['player_name'] == "A"].iloc[0]
        assert winner['position'] == 1
        assert winner['rating_before'] == 1500
        assert winner['rating_change'] == 20
        assert winner['rating'] == 1520

    def test_keeps_game_metadata(self):
        df = replay_history([Game(players=["A", "B"], game_id="g-1")], CONFIG)
        assert set(df['game_id']) == {"g-1"}

    def test_empty_history(self):
        df = replay_history([], CONFIG)
        assert df.empty
        assert list(df.columns) == HISTORY_COLUMNS
