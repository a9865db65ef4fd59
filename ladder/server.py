"""
Leaderboard HTTP Server

Serves the published scores as JSON, a refresh endpoint that recomputes them
from the game source, and an HTML landing page.

Usage:
    python -m ladder.server --port 8080
"""

import argparse

from flask import Flask, jsonify, render_template

from ladder.config import RECENT_GAMES_LIMIT, REPLAY_WINDOW, SERVER_HOST, SERVER_PORT
from ladder.elo.engine import InvalidGameError
from ladder.ingestion.common import IngestionError
from ladder.ingestion.sheets import fetch_games
from ladder.models import RatingConfig
from ladder.service import LeaderboardService
from ladder.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

MEDALS = {1: "🥇", 2: "🥈", 3: "🥉"}


def create_app(service: LeaderboardService) -> Flask:
    app = Flask(__name__)
    app.config['LEADERBOARD_SERVICE'] = service

    @app.get('/api/scores')
    def get_scores():
        return jsonify(service.scores())

    @app.post('/api/refresh')
    def refresh():
        try:
            snapshot = service.refresh()
        except (IngestionError, InvalidGameError) as e:
            logger.error(f"Refresh failed: {e}")
            return str(e), 500, {'Content-Type': 'text/plain; charset=utf-8'}
        return jsonify(snapshot)

    @app.get('/api/games')
    def get_games():
        try:
            games = service.source()
        except IngestionError as e:
            logger.error(f"Could not load games: {e}")
            return str(e), 500, {'Content-Type': 'text/plain; charset=utf-8'}
        return jsonify([g.to_dict() for g in games])

    @app.get('/api/rankings')
    def get_rankings():
        return jsonify([row._asdict() for row in service.leaderboard()])

    @app.get('/')
    def landing():
        ranked = service.leaderboard()
        return render_template(
            'landing.html',
            ranked=ranked,
            medals=MEDALS,
            games=service.recent_games(RECENT_GAMES_LIMIT),
            player_count=len(ranked),
        )

    return app


def main(argv=None):
    parser = argparse.ArgumentParser(description="Serve the Elo leaderboard over HTTP.")
    parser.add_argument("--host", default=SERVER_HOST, help="listen address")
    parser.add_argument("--port", type=int, default=SERVER_PORT, help="listen port")
    parser.add_argument("--window", type=int, default=REPLAY_WINDOW,
                        help="replay only the most recent N games (0 = all)")
    args = parser.parse_args(argv)

    service = LeaderboardService(fetch_games, RatingConfig(), window=args.window)

    # Initial refresh populates the store; the server still starts without it
    try:
        service.refresh()
    except (IngestionError, InvalidGameError) as e:
        logger.warning(f"Initial refresh failed: {e}")

    logger.info(f"Listening on {args.host}:{args.port}")
    create_app(service).run(host=args.host, port=args.port)


if __name__ == "__main__":
    main()
