"""
Game analytics: tables and statistics over simulated games.
"""

from typing import List

import pandas as pd

from models import GameRecord
from simulation import summarize_move_counts

COUNTER_COLUMNS = ["moves", "stucks", "candy_jumps", "candy_jumps_back", "roads"]


def games_frame(records: List[GameRecord]) -> pd.DataFrame:
    """One row per game: game number, total moves, winning seat."""
    rows = [
        {"game": i, "moves": r.moves, "winner": r.winner}
        for i, r in enumerate(records)
    ]
    return pd.DataFrame(rows, columns=["game", "moves", "winner"])


def players_frame(records: List[GameRecord]) -> pd.DataFrame:
    """One row per (game, seat) with the player's final position and counters."""
    rows = []
    for i, r in enumerate(records):
        for seat, counters in enumerate(r.players):
            row = {"game": i, "seat": seat, "won": seat == r.winner}
            row.update(counters)
            rows.append(row)
    return pd.DataFrame(rows, columns=["game", "seat", "won", "pos"] + COUNTER_COLUMNS)


def move_count_distribution(records: List[GameRecord]) -> pd.DataFrame:
    """How many games took each number of moves, with share and cumulative share."""
    df = games_frame(records)
    dist = df.groupby("moves").size().reset_index(name="games")
    dist["share"] = dist["games"] / len(df)
    dist["cumulative"] = dist["share"].cumsum()
    return dist


def winner_seat_frequencies(records: List[GameRecord], n_players: int) -> pd.DataFrame:
    """Wins and win share for every seat, zero-win seats included."""
    df = games_frame(records)
    wins = df["winner"].value_counts().reindex(range(n_players), fill_value=0)
    out = pd.DataFrame({"seat": list(range(n_players)), "wins": wins.to_numpy()})
    out["share"] = out["wins"] / max(len(df), 1)
    return out


def player_counter_means(records: List[GameRecord]) -> pd.DataFrame:
    """Mean of every per-player counter, by seat."""
    df = players_frame(records)
    return df.groupby("seat")[COUNTER_COLUMNS].mean().reset_index()


def summary_frame(records: List[GameRecord]) -> pd.DataFrame:
    """
    The reported move-count statistics (min, med, 90p, max, picked by index
    from the sorted counts) plus mean and standard deviation.
    """
    moves = games_frame(records)["moves"]
    stats = dict(summarize_move_counts(moves.tolist()))
    stats["mean"] = float(moves.mean())
    stats["std"] = float(moves.std(ddof=0))
    return pd.DataFrame({"statistic": list(stats.keys()), "value": list(stats.values())})
