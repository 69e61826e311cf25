"""
Streamlit dashboard for simulation results.
"""

import streamlit as st

from analytics import (
    games_frame,
    player_counter_means,
    summary_frame,
    winner_seat_frequencies,
)
from board import build_board
from config import (
    ALLOW_BACK_JUMPS,
    DASHBOARD_MAX_PLAYERS,
    DASHBOARD_SIMULATIONS,
    DEFAULT_PLAYERS,
)
from simulation import simulate_games, summarize_move_counts
from ui import (
    render_board,
    render_counter_means_table,
    render_move_histogram,
    render_summary_metrics,
    render_summary_table,
    render_winner_table,
)


def run_app() -> None:
    """Run the main Streamlit application."""
    st.set_page_config(page_title="Candy Lane Simulator", layout="wide")
    st.title("Candy Lane Simulator")

    board = build_board()

    with st.sidebar:
        n_players = st.number_input("Players", min_value=1, max_value=DASHBOARD_MAX_PLAYERS, value=DEFAULT_PLAYERS)
        n_games = st.number_input("Games", min_value=1, max_value=100000, value=DASHBOARD_SIMULATIONS, step=500)
        allow_back = st.checkbox("Allow backward candy jumps", value=ALLOW_BACK_JUMPS)
        seed_text = st.text_input("Seed (blank = random)", value="")
        run = st.button("Run simulation")

    if run or "records" not in st.session_state:
        seed = int(seed_text) if seed_text.strip().lstrip("-").isdigit() else None
        st.session_state["records"] = simulate_games(
            int(n_games),
            n_players=int(n_players),
            allow_back_jumps=allow_back,
            seed=seed,
            board=board,
        )
        st.session_state["n_players"] = int(n_players)

    records = st.session_state["records"]
    players = st.session_state["n_players"]

    with st.expander("Board", expanded=False):
        render_board(board)

    render_summary_metrics(summarize_move_counts(r.moves for r in records))

    left, right = st.columns([1.6, 1])
    with left:
        render_move_histogram(games_frame(records))
    with right:
        render_summary_table(summary_frame(records))
        render_winner_table(winner_seat_frequencies(records, players))

    render_counter_means_table(player_counter_means(records))
    st.caption(f"{len(records)} simulated games with {players} player(s).")


if __name__ == "__main__":
    run_app()
