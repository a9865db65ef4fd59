"""
Tests for the leaderboard HTTP server.
"""

import pytest

from ladder.ingestion.sheets import SheetsError
from ladder.models import Game
from ladder.server import create_app
from ladder.service import LeaderboardService


class Source:
    def __init__(self):
        self.games = [Game(["Alice", "Bob"], game_id="1", date="Mon, 01 Jan 2024 20:00:00 GMT"),
                      Game(["Alice", "Bob", "Carol"], game_id="2")]
        self.error = None

    def __call__(self):
        if self.error:
            raise self.error
        return list(self.games)


@pytest.fixture
def source():
    return Source()


@pytest.fixture
def service(source):
    return LeaderboardService(source)


@pytest.fixture
def client(service):
    app = create_app(service)
    app.config['TESTING'] = True
    return app.test_client()


class TestScoresApi:
    """Tests for /api/scores and /api/refresh."""

    def test_scores_empty_before_refresh(self, client):
        response = client.get('/api/scores')
        assert response.status_code == 200
        assert response.get_json() == {}

    def test_refresh_publishes(self, client, service):
        response = client.post('/api/refresh')
        assert response.status_code == 200
        assert response.get_json() == service.scores()
        assert client.get('/api/scores').get_json() == service.scores()

    def test_refresh_requires_post(self, client):
        assert client.get('/api/refresh').status_code == 405

    def test_failed_refresh_is_server_error(self, client, service, source):
        client.post('/api/refresh')
        published = service.scores()

        source.error = SheetsError("unable to retrieve data from sheet")
        response = client.post('/api/refresh')
        assert response.status_code == 500
        assert b"unable to retrieve data" in response.data
        assert client.get('/api/scores').get_json() == published

    def test_invalid_game_is_server_error(self, client, source):
        source.games.append(Game(["Bob", "Bob", "Carol"]))
        assert client.post('/api/refresh').status_code == 500


class TestGamesApi:
    """Tests for /api/games."""

    def test_lists_games(self, client):
        games = client.get('/api/games').get_json()
        assert games[0]["id"] == "1"
        assert games[0]["rankings"] == ["Alice", "Bob"]
        assert games[1]["timestamp"] is None

    def test_source_failure(self, client, source):
        source.error = SheetsError("no game data found")
        response = client.get('/api/games')
        assert response.status_code == 500

    def test_post_not_allowed(self, client):
        assert client.post('/api/games').status_code == 405


class TestRankingsApi:
    """Tests for /api/rankings."""

    def test_ranked_rows(self, client):
        client.post('/api/refresh')
        rows = client.get('/api/rankings').get_json()
        assert [r["player"] for r in rows] == ["Alice", "Bob", "Carol"]
        assert rows[0] == {"position": 1, "player": "Alice", "rating": rows[0]["rating"]}
        assert rows[0]["rating"] > rows[1]["rating"] > rows[2]["rating"]


class TestLanding:
    """Tests for the HTML landing page."""

    def test_renders_rankings_and_games(self, client):
        client.post('/api/refresh')
        response = client.get('/')
        body = response.get_data(as_text=True)
        assert response.status_code == 200
        assert "3 ranked players" in body
        assert "Alice" in body and "Carol" in body
        assert "🥇" in body

    def test_renders_without_scores(self, client, source):
        source.error = SheetsError("down")
        response = client.get('/')
        body = response.get_data(as_text=True)
        assert response.status_code == 200
        assert "No scores published yet." in body
        assert "No games available." in body
