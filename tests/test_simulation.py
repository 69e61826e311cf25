import pytest

from board import build_board
from deck import Deck
from models import ColorCard, Color
from simulation import (
    format_summary,
    new_game,
    play_game,
    simulate_games,
    summarize_move_counts,
)


def test_summarize_picks_by_index():
    counts = [50, 10, 40, 20, 30, 60, 70, 80, 90, 100]
    assert summarize_move_counts(counts) == {"min": 10, "med": 60, "90p": 100, "max": 100}


def test_summarize_single_value():
    assert summarize_move_counts([17]) == {"min": 17, "med": 17, "90p": 17, "max": 17}


def test_summarize_empty_raises():
    with pytest.raises(ValueError):
        summarize_move_counts([])


def test_format_summary_order():
    text = format_summary({"min": 1, "med": 2, "90p": 3, "max": 4})
    assert text.splitlines() == ["min 1", "med 2", "90p 3", "max 4"]


def test_new_game_needs_a_player():
    with pytest.raises(ValueError):
        new_game(0)


def test_play_game_resets_between_runs():
    board = build_board("r")
    deck = Deck(cards=[ColorCard(Color.RED)], seed=0)
    game = new_game(2)
    players = game.players

    first = play_game(game, board, deck)
    second = play_game(game, board, deck)

    assert first == second
    assert first.moves == 3
    assert first.winner == 0
    assert game.players is players
    assert first.players[0]["pos"] == 1
    assert first.players[1]["pos"] == 0


def test_single_game_terminates_with_positive_moves():
    records = simulate_games(1, n_players=1, seed=3)
    assert len(records) == 1
    summary = summarize_move_counts(r.moves for r in records)
    assert summary["min"] > 0
    assert len(set(summary.values())) == 1


def test_percentiles_are_ordered():
    records = simulate_games(1000, n_players=2, seed=11)
    s = summarize_move_counts(r.moves for r in records)
    assert s["min"] <= s["med"] <= s["90p"] <= s["max"]
    assert {r.winner for r in records} <= {0, 1}


def test_seeded_simulations_repeat():
    a = [r.moves for r in simulate_games(200, n_players=3, seed=5)]
    b = [r.moves for r in simulate_games(200, n_players=3, seed=5)]
    assert a == b


def test_no_back_jumps_never_counts_backward_jumps():
    records = simulate_games(300, seed=9, allow_back_jumps=False)
    assert all(r.players[0]["candy_jumps_back"] == 0 for r in records)


def test_winner_made_every_move_count():
    for r in simulate_games(100, n_players=2, seed=2):
        assert sum(p["moves"] for p in r.players) == r.moves
        assert r.players[r.winner]["pos"] == 136


def test_rejects_zero_games():
    with pytest.raises(ValueError):
        simulate_games(0)
