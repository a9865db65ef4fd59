import html
from pathlib import Path

import streamlit as st
import pandas as pd
import plotly.express as px

from ladder.config import BASELINE_RATING, DEFAULT_GAMES_CSV, RECENT_GAMES_LIMIT, REPLAY_WINDOW
from ladder.elo.ranking import ranking_frame
from ladder.elo.replay import replay_history
from ladder.ingestion.common import IngestionError, games_frame
from ladder.ingestion.csv_log import load_csv_games
from ladder.ingestion.sheets import fetch_games
from ladder.models import RatingConfig
from ladder.service import LeaderboardService

# --- Page Configuration ---
st.set_page_config(
    page_title="Leaderboard Dashboard",
    page_icon="🏆",
    layout="wide",
    initial_sidebar_state="expanded"
)

# --- Design System ---
ACCENT_COLORS = {
    "primary": "#FF6B6B",
    "success": "#10B981",
    "danger": "#EF4444",
    "chart_palette": [
        "#FF6B6B", "#3B82F6", "#10B981", "#F59E0B", "#8B5CF6",
        "#EC4899", "#06B6D4", "#84CC16", "#F97316", "#6366F1"
    ],
}

RANK_ICONS = {1: "👑", 2: "🥈", 3: "🥉"}

SOURCE_OPTIONS = {
    "Google Sheets": "sheets",
    "Local CSV log": "csv",
}


def get_rank_badge(position):
    """Medal for the podium, plain number for everyone else."""
    icon = RANK_ICONS.get(int(position))
    return f"{icon} #{position}" if icon else f"#{position}"


def apply_plotly_style(fig):
    """Apply consistent styling to Plotly figures."""
    system_font = '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif'
    grid_color = "rgba(128, 128, 128, 0.4)"
    fig.update_layout(
        font=dict(family=system_font),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=20, r=20, t=30, b=20),
        hoverlabel=dict(bgcolor="rgba(50, 50, 50, 0.9)", font_color="#FFFFFF"),
    )
    fig.update_xaxes(gridcolor=grid_color)
    fig.update_yaxes(gridcolor=grid_color)
    return fig


# --- Data Loading Functions ---
def make_source(source_kind, csv_path):
    """Build a zero-argument game source for the selected backend."""
    if source_kind == "csv":
        return lambda: load_csv_games(Path(csv_path))
    return fetch_games


@st.cache_resource
def get_service(source_kind, csv_path, window):
    """One service (and published store) shared by every browser session."""
    return LeaderboardService(make_source(source_kind, csv_path), RatingConfig(), window=window or None)


@st.cache_data(ttl=3600)
def load_history_data(source_kind, csv_path, window):
    """Per-game rating history for trajectory charts."""
    games = make_source(source_kind, csv_path)()
    return replay_history(games, RatingConfig(), window=window or None)


# --- Main App ---
def main():
    st.title("🏆 Leaderboard")

    with st.sidebar:
        source_label = st.radio("Game source", list(SOURCE_OPTIONS))
        source_kind = SOURCE_OPTIONS[source_label]
        csv_path = st.text_input("CSV path", str(DEFAULT_GAMES_CSV), disabled=source_kind != "csv")
        window = st.number_input("Replay window (0 = all games)", min_value=0, value=REPLAY_WINDOW, step=10)
        refresh_clicked = st.button("Refresh scores", type="primary")

    service = get_service(source_kind, csv_path, int(window))

    if refresh_clicked or len(service.store) == 0:
        try:
            service.refresh()
            load_history_data.clear()
        except (IngestionError, ValueError) as e:
            st.error(f"Refresh failed, showing the last published scores: {html.escape(str(e))}")

    df_rank = ranking_frame(service.scores())
    if df_rank.empty:
        st.info("No scores published yet.")
        return

    tab_rankings, tab_tracker, tab_games = st.tabs(["Rankings", "Player Tracker", "Recent Games"])

    with tab_rankings:
        col1, col2, col3 = st.columns(3)
        col1.metric("Players", len(df_rank))
        col2.metric("Top rating", int(df_rank['rating'].max()))
        col3.metric("Median rating", int(df_rank['rating'].median()))

        df_display = df_rank.copy()
        df_display['position'] = df_display['position'].apply(get_rank_badge)
        st.dataframe(
            df_display.rename(columns={'position': 'Rank', 'player_name': 'Player', 'rating': 'Elo'}),
            hide_index=True,
            use_container_width=True,
        )

        fig_dist = px.histogram(
            df_rank, x='rating', nbins=30,
            labels={'rating': 'Elo Rating'},
            color_discrete_sequence=[ACCENT_COLORS["primary"]]
        )
        apply_plotly_style(fig_dist)
        fig_dist.update_layout(height=300, showlegend=False, yaxis_title="Players")
        st.plotly_chart(fig_dist, use_container_width=True)

    with tab_tracker:
        try:
            df_history = load_history_data(source_kind, csv_path, int(window))
        except (IngestionError, ValueError) as e:
            st.error(f"Could not load rating history: {html.escape(str(e))}")
            df_history = pd.DataFrame()

        if df_history.empty:
            st.info("No rating history available.")
        else:
            players = st.multiselect(
                "Players",
                df_rank['player_name'].tolist(),
                default=df_rank['player_name'].head(3).tolist(),
            )
            df_chart = df_history[df_history['player_name'].isin(players)].sort_values('game_index')
            if not df_chart.empty:
                fig_rating = px.line(
                    df_chart,
                    x='game_index',
                    y='rating',
                    color='player_name',
                    markers=True,
                    hover_data=['game_id', 'position', 'rating_change'],
                    labels={'game_index': 'Game', 'rating': 'Elo Rating', 'player_name': 'Player'},
                    color_discrete_sequence=ACCENT_COLORS["chart_palette"]
                )
                apply_plotly_style(fig_rating)
                fig_rating.update_layout(height=400)
                fig_rating.add_hline(
                    y=BASELINE_RATING,
                    line_dash="dash",
                    line_color="rgba(255, 107, 107, 0.4)",
                    annotation_text=f"Baseline ({BASELINE_RATING})",
                )
                st.plotly_chart(fig_rating, use_container_width=True)

    with tab_games:
        games = service.recent_games(RECENT_GAMES_LIMIT)
        if not games:
            st.info("No games available.")
        else:
            st.dataframe(games_frame(games), hide_index=True, use_container_width=True)


if __name__ == "__main__":
    main()
