"""
Command-line entry point.
"""

import argparse
import logging
import sys
from typing import List, Optional

from board import BoardError, build_board
from config import ALLOW_BACK_JUMPS, DEFAULT_GAMES, DEFAULT_PLAYERS, TRACK
from deck import Deck
from game_logic import TurnLimitExceeded
from simulation import format_summary, new_game, play_game, simulate_games, summarize_move_counts

logger = logging.getLogger(__name__)


def _parse_bool(text: str) -> bool:
    value = text.strip().lower()
    if value in ("1", "true", "t", "yes", "y", "on"):
        return True
    if value in ("0", "false", "f", "no", "n", "off"):
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got {text!r}")


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {text!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="candysim",
        description="Simulate games of Candy Lane and report how long they take",
    )
    parser.add_argument('--players', type=_positive_int, default=DEFAULT_PLAYERS, help='number of players')
    parser.add_argument('--n', type=_positive_int, default=DEFAULT_GAMES, help='number of games to simulate')
    parser.add_argument('--verbose', type=_parse_bool, nargs='?', const=True, default=False,
                        help='play one game and print every turn')
    parser.add_argument('--allow-back', type=_parse_bool, nargs='?', const=True, default=ALLOW_BACK_JUMPS,
                        help='allow backwards candy jumps')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deck')
    parser.add_argument('--reseed-on-refill', type=_parse_bool, nargs='?', const=True, default=False,
                        help='reseed the deck from the clock on every reshuffle')
    parser.add_argument('--max-turns', type=_positive_int, default=None,
                        help='abort a game after this many turns (default: no limit)')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='logging level (stderr)')
    return parser


def run_verbose(args: argparse.Namespace) -> None:
    """Play a single game, printing each turn and the final player counters."""
    board = build_board(TRACK)
    deck = Deck(seed=args.seed, reseed_on_refill=args.reseed_on_refill)
    game = new_game(args.players)
    play_game(
        game,
        board,
        deck,
        allow_back_jumps=args.allow_back,
        max_turns=args.max_turns,
        on_turn=lambda turn: print(turn),
    )
    print(f"moves: {game.moves}")
    for p in game.players:
        print(f"  player: {p}")


def run_batch(args: argparse.Namespace) -> None:
    board = build_board(TRACK)
    records = simulate_games(
        args.n,
        n_players=args.players,
        allow_back_jumps=args.allow_back,
        seed=args.seed,
        reseed_on_refill=args.reseed_on_refill,
        max_turns=args.max_turns,
        board=board,
    )
    print(format_summary(summarize_move_counts(r.moves for r in records)))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format='%(levelname)s %(name)s: %(message)s')

    try:
        if args.verbose:
            run_verbose(args)
        else:
            run_batch(args)
    except (BoardError, TurnLimitExceeded) as e:
        logger.error("fatal: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
