"""
UI components and visualization helpers.
"""

import pandas as pd
import plotly.express as px
import streamlit as st

from board import Board
from config import COLOR_MAP
from models import CandySquare


def render_summary_metrics(summary: dict) -> None:
    """Show min / med / 90p / max as a row of metrics."""
    cols = st.columns(len(summary))
    for col, (name, value) in zip(cols, summary.items()):
        with col:
            st.metric(name, value)


def render_move_histogram(games_df: pd.DataFrame) -> None:
    """Histogram of moves per game."""
    st.markdown("#### Moves per game")
    if games_df.empty:
        st.info("No games simulated yet.")
        return
    fig = px.histogram(games_df, x="moves", nbins=60)
    fig.update_layout(
        xaxis_title="Moves until someone finishes",
        yaxis_title="Games",
        height=350,
        margin=dict(l=10, r=10, t=30, b=10),
    )
    st.plotly_chart(fig, use_container_width=True)


def render_summary_table(summary_df: pd.DataFrame) -> None:
    st.markdown("#### Move-count statistics")
    st.dataframe(summary_df, use_container_width=True, hide_index=True)


def render_winner_table(winners_df: pd.DataFrame) -> None:
    st.markdown("#### Wins by seat")
    st.dataframe(winners_df, use_container_width=True, hide_index=True)


def render_counter_means_table(means_df: pd.DataFrame) -> None:
    st.markdown("#### Average per-player counters")
    st.dataframe(means_df, use_container_width=True, hide_index=True)


def render_board(board: Board) -> None:
    """Plot the track as a strip of colored markers; candy, pit and road squares are labelled."""
    rows = []
    for i, s in enumerate(board.squares):
        if isinstance(s, CandySquare):
            kind, label = "candy", s.candy
        else:
            kind = str(s.color)
            label = ""
            if s.pit:
                label = "pit"
            elif s.road_start is not None:
                label = f"{s.road_start} -> {s.warp_to}"
            elif s.road_end is not None:
                label = f"{s.road_end} end"
        rows.append({"square": i, "row": i // 34, "col": i % 34, "kind": kind, "label": label})

    df = pd.DataFrame(rows)
    fig = px.scatter(
        df,
        x="col",
        y="row",
        color="kind",
        color_discrete_map=COLOR_MAP,
        hover_name="square",
        hover_data={"label": True, "row": False, "col": False},
        text="label",
    )
    fig.update_traces(marker=dict(size=16, symbol="square", line=dict(width=1, color="black")))
    fig.update_layout(
        xaxis=dict(visible=False),
        yaxis=dict(visible=False, autorange="reversed"),
        height=300,
        margin=dict(l=10, r=10, t=30, b=10),
        legend_title_text="Square",
    )
    st.plotly_chart(fig, use_container_width=True)
