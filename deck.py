"""
Card deck: the fixed template and a shuffled working supply.
"""

import logging
import random
import time
from collections import deque
from typing import Deque, Iterable, List, Optional, Tuple

from config import CANDY_CARDS, COLOR_CARDS
from models import CandyCard, Card, Color, ColorCard

logger = logging.getLogger(__name__)


def build_deck() -> Tuple[Card, ...]:
    """Candy cards first, then per color its double cards and its single cards."""
    cards: List[Card] = [CandyCard(candy=name) for name in CANDY_CARDS]
    card_type = 0
    for color_name, (doubles, singles) in COLOR_CARDS.items():
        color = Color(color_name)
        for count, double in ((doubles, True), (singles, False)):
            card = ColorCard(color=color, double=double, card_type=card_type)
            card_type += 1
            cards.extend([card] * count)
    return tuple(cards)


class Deck:
    """
    Deals cards without replacement from a shuffled copy of the template,
    refilling and reshuffling when the copy runs out.

    The random source is seeded once, from `seed` (or system entropy if None).
    With reseed_on_refill=True it is reseeded from the wall clock before every
    refill instead; those runs cannot be reproduced.
    Not safe for concurrent use.
    """

    def __init__(
        self,
        cards: Optional[Iterable[Card]] = None,
        seed: Optional[int] = None,
        reseed_on_refill: bool = False,
    ):
        self.template: Tuple[Card, ...] = tuple(cards) if cards is not None else build_deck()
        if not self.template:
            raise ValueError("deck needs at least one card")
        self.rng = random.Random(seed)
        self.reseed_on_refill = reseed_on_refill
        self.shuffled: Deque[Card] = deque()
        self.refills = 0

    def __len__(self) -> int:
        return len(self.template)

    def remaining(self) -> int:
        return len(self.shuffled)

    def refill(self) -> None:
        if self.reseed_on_refill:
            self.rng.seed(time.time_ns())
        cards = list(self.template)
        self.rng.shuffle(cards)
        self.shuffled = deque(cards)
        self.refills += 1
        logger.debug("deck refilled (%d cards, refill #%d)", len(cards), self.refills)

    def deal(self) -> Card:
        if not self.shuffled:
            self.refill()
        return self.shuffled.popleft()
