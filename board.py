"""
Board construction and lookups.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Tuple, Union

from config import COLOR_CODES, TRACK
from models import CandySquare, Color, ColorSquare, Square


class BoardError(ValueError):
    """The track data is inconsistent."""


class UnknownCandyError(BoardError):
    """A candy name has no square on the board."""


@dataclass(frozen=True)
class Board:
    squares: Tuple[Square, ...]
    candy_positions: Dict[str, int]
    road_ends: Dict[str, int]

    def __len__(self) -> int:
        return len(self.squares)

    def __getitem__(self, index: int) -> Square:
        return self.squares[index]

    def candy_position(self, candy: str) -> int:
        try:
            return self.candy_positions[candy]
        except KeyError:
            raise UnknownCandyError(f"no square for candy {candy!r}") from None


def parse_square(token: str) -> Square:
    """Turn one track token (`r`, `*heart`, `g>rainbow`, `p<mountain`, `b!`) into a square."""
    if token.startswith("*"):
        name = token[1:]
        if not name:
            raise BoardError("candy square without a name")
        return CandySquare(candy=name)

    code, rest = token[:1], token[1:]
    if code not in COLOR_CODES:
        raise BoardError(f"bad track token {token!r}")
    color = Color(COLOR_CODES[code])

    if not rest:
        return ColorSquare(color=color)
    if rest == "!":
        return ColorSquare(color=color, pit=True)
    if rest[0] == ">" and len(rest) > 1:
        return ColorSquare(color=color, road_start=rest[1:])
    if rest[0] == "<" and len(rest) > 1:
        return ColorSquare(color=color, road_end=rest[1:])
    raise BoardError(f"bad track token {token!r}")


def find_road_end(squares: List[Square], name: str) -> int:
    for i, s in enumerate(squares):
        if isinstance(s, ColorSquare) and s.road_end == name:
            return i
    raise BoardError(f"road {name!r} has no end")


def build_board(track: Union[str, Iterable[str]] = TRACK) -> Board:
    """
    Build the board from a track literal.
    Road starts get their warp target resolved and candy squares are indexed.
    Raises BoardError on a road without an end or a duplicate candy/road-end name.
    """
    tokens = track.split() if isinstance(track, str) else list(track)
    squares: List[Square] = [parse_square(t) for t in tokens]

    candy_positions: Dict[str, int] = {}
    road_ends: Dict[str, int] = {}

    for i, s in enumerate(squares):
        if isinstance(s, CandySquare):
            if s.candy in candy_positions:
                raise BoardError(f"duplicate candy square {s.candy!r}")
            candy_positions[s.candy] = i
        elif s.road_end is not None:
            if s.road_end in road_ends:
                raise BoardError(f"duplicate end for road {s.road_end!r}")
            road_ends[s.road_end] = i

    for i, s in enumerate(squares):
        if isinstance(s, ColorSquare) and s.road_start is not None:
            squares[i] = replace(s, warp_to=find_road_end(squares, s.road_start))

    return Board(
        squares=tuple(squares),
        candy_positions=candy_positions,
        road_ends=road_ends,
    )
