"""
Monte Carlo driver and move-count statistics.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from board import Board, build_board
from config import ALLOW_BACK_JUMPS, DEFAULT_PLAYERS
from deck import Deck
from game_logic import run_game
from models import Game, GameRecord, Player, Turn

logger = logging.getLogger(__name__)


def new_game(n_players: int = DEFAULT_PLAYERS) -> Game:
    if n_players < 1:
        raise ValueError("a game needs at least one player")
    return Game(players=[Player() for _ in range(n_players)])


def play_game(
    game: Game,
    board: Board,
    deck: Deck,
    allow_back_jumps: bool = ALLOW_BACK_JUMPS,
    max_turns: Optional[int] = None,
    on_turn: Optional[Callable[[Turn], None]] = None,
) -> GameRecord:
    """Reset `game`, play it to the end and snapshot the outcome."""
    game.reset()
    run_game(game, board, deck, allow_back_jumps, max_turns=max_turns, on_turn=on_turn)
    return GameRecord(
        moves=game.moves,
        winner=game.winner_seat(),
        players=tuple(p.counters() for p in game.players),
    )


def simulate_games(
    n_games: int,
    n_players: int = DEFAULT_PLAYERS,
    allow_back_jumps: bool = ALLOW_BACK_JUMPS,
    seed: Optional[int] = None,
    reseed_on_refill: bool = False,
    max_turns: Optional[int] = None,
    board: Optional[Board] = None,
) -> List[GameRecord]:
    """
    Monte Carlo: play `n_games` games with one Game and one Deck reused
    across runs (the deck is not reshuffled between games).

    Returns:
      - one GameRecord per game, in play order
    """
    if n_games < 1:
        raise ValueError("n_games must be at least 1")
    board = board if board is not None else build_board()
    deck = Deck(seed=seed, reseed_on_refill=reseed_on_refill)
    game = new_game(n_players)

    logger.info("simulating %d games with %d player(s)", n_games, n_players)
    records = [
        play_game(game, board, deck, allow_back_jumps, max_turns=max_turns)
        for _ in range(n_games)
    ]
    logger.info("done: %d games, %d deck refills", n_games, deck.refills)
    return records


def summarize_move_counts(counts: Iterable[int]) -> Dict[str, int]:
    """
    Sort move counts and pick min, median (index n//2),
    90th percentile (index n*9//10) and max.
    """
    ordered = sorted(counts)
    if not ordered:
        raise ValueError("no move counts to summarize")
    n = len(ordered)
    return {
        "min": ordered[0],
        "med": ordered[n // 2],
        "90p": ordered[n * 9 // 10],
        "max": ordered[-1],
    }


def format_summary(summary: Dict[str, int]) -> str:
    return "\n".join(f"{name} {value}" for name, value in summary.items())
