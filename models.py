"""
Data models and state representations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union


class Color(Enum):
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ColorSquare:
    """A colored square; may also be a pit, a road start or a road end."""
    color: Color
    pit: bool = False
    road_start: Optional[str] = None
    road_end: Optional[str] = None
    warp_to: Optional[int] = None       # index of the road end, road starts only


@dataclass(frozen=True)
class CandySquare:
    """A named square reached only through its candy card."""
    candy: str


Square = Union[ColorSquare, CandySquare]


@dataclass(frozen=True)
class CandyCard:
    candy: str

    def __str__(self) -> str:
        return self.candy


@dataclass(frozen=True)
class ColorCard:
    color: Color
    double: bool = False
    card_type: int = 0                  # unique per (color, double)

    def __str__(self) -> str:
        if self.double:
            return f"double {self.color}"
        return str(self.color)


Card = Union[CandyCard, ColorCard]


@dataclass
class Player:
    """Position and counters for one participant."""
    pos: int = -1                       # -1 = not yet on the board
    moves: int = 0
    stucks: int = 0
    candy_jumps: int = 0
    candy_jumps_back: int = 0
    roads: int = 0

    def reset(self) -> None:
        self.pos = -1
        self.moves = 0
        self.stucks = 0
        self.candy_jumps = 0
        self.candy_jumps_back = 0
        self.roads = 0

    def counters(self) -> Dict[str, int]:
        return {
            "pos": self.pos,
            "moves": self.moves,
            "stucks": self.stucks,
            "candy_jumps": self.candy_jumps,
            "candy_jumps_back": self.candy_jumps_back,
            "roads": self.roads,
        }

    def __str__(self) -> str:
        return " ".join(f"{k}={v}" for k, v in self.counters().items())


@dataclass
class Game:
    """Players in seat order plus the running move counter."""
    players: List[Player]
    moves: int = 0
    winner: Optional[Player] = None
    turn: int = -1                      # seat of the player who moved last

    def reset(self) -> None:
        self.moves = 0
        self.winner = None
        self.turn = -1
        for p in self.players:
            p.reset()

    def winner_seat(self) -> Optional[int]:
        for seat, p in enumerate(self.players):
            if p is self.winner:
                return seat
        return None


@dataclass(frozen=True)
class Turn:
    """What happened on one turn."""
    seat: int
    card: Card
    was: int
    now: int
    won: bool = False

    def __str__(self) -> str:
        line = f"{self.card}\t{self.was} => {self.now}"
        if self.won:
            line += " WIN"
        return line


@dataclass(frozen=True)
class GameRecord:
    """Outcome of one finished game."""
    moves: int
    winner: int
    players: Tuple[Dict[str, int], ...] = field(default_factory=tuple)
