"""
Core game logic: the movement rule and the turn loop.
"""

from typing import Callable, Optional

from board import Board
from deck import Deck
from models import CandyCard, Card, ColorSquare, Game, Player, Turn


class TurnLimitExceeded(RuntimeError):
    """A game ran past its max_turns safety valve."""


def move_player(board: Board, player: Player, card: Card, allow_back_jumps: bool = True) -> bool:
    """
    Apply `card` to `player`, in priority order:
      1) Candy card: jump to the candy's square. A jump backwards is discarded
         when allow_back_jumps is False. Candy jumps never win.
      2) Pit: a player on a pit stays put unless the card matches its color.
      3) Color card: scan forward to the next square of the card's color,
         twice for a double. Running off the end of the board wins.
      4) Road: landing on a road start warps to the road end.
    Returns True if the player finished.
    """
    if isinstance(card, CandyCard):
        pos = board.candy_position(card.candy)
        if pos < player.pos:
            if not allow_back_jumps:
                return False
            player.candy_jumps_back += 1
        player.candy_jumps += 1
        player.pos = pos
        return False

    if player.pos >= 0:
        current = board[player.pos]
        if isinstance(current, ColorSquare) and current.pit and current.color is not card.color:
            player.stucks += 1
            return False

    square = None
    for _ in range(2 if card.double else 1):
        while True:
            player.pos += 1
            if player.pos >= len(board):
                return True
            square = board[player.pos]
            if isinstance(square, ColorSquare) and square.color is card.color:
                break

    if square.road_start is not None:
        player.pos = square.warp_to
        player.roads += 1
    return False


def play_turn(game: Game, board: Board, deck: Deck, allow_back_jumps: bool = True) -> Turn:
    """Deal one card to the next player in seat order and apply it."""
    game.turn = (game.turn + 1) % len(game.players)
    player = game.players[game.turn]
    game.moves += 1
    player.moves += 1

    was = player.pos
    card = deck.deal()
    won = move_player(board, player, card, allow_back_jumps)
    if won:
        game.winner = player
    return Turn(seat=game.turn, card=card, was=was, now=player.pos, won=won)


def run_game(
    game: Game,
    board: Board,
    deck: Deck,
    allow_back_jumps: bool = True,
    max_turns: Optional[int] = None,
    on_turn: Optional[Callable[[Turn], None]] = None,
) -> Player:
    """
    Play turns until someone finishes and return the winner.
    There is no turn limit unless max_turns is given.
    """
    while True:
        if max_turns is not None and game.moves >= max_turns:
            raise TurnLimitExceeded(f"no winner after {game.moves} turns")
        turn = play_turn(game, board, deck, allow_back_jumps)
        if on_turn is not None:
            on_turn(turn)
        if turn.won:
            return game.winner
