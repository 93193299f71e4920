"""Deck: draw pile, discard pile, generation and shuffling."""

import logging
import random
from typing import Iterable, List, Optional

from unotable.engine.card import ACTION_KINDS, Card, CardKind, Color
from unotable.errors import EmptyPileError

logger = logging.getLogger(__name__)

DECK_SIZE = 60


def generate_cards() -> List[Card]:
    """Build the full, unshuffled card set.

    - 4 colors x (0-9, Skip, Reverse, Draw Two): 52 cards, one of each
    - 4 Wild, 4 Wild Draw Four: 8 cards
    - Total: 60 cards
    """
    cards: List[Card] = []

    for color in Color:
        for number in range(10):
            cards.append(Card(color=color, kind=CardKind.NUMBER, number=number))
        for kind in ACTION_KINDS:
            cards.append(Card(color=color, kind=kind))

    for _ in range(4):
        cards.append(Card(color=None, kind=CardKind.WILD))
        cards.append(Card(color=None, kind=CardKind.WILD_DRAW_FOUR))

    return cards


class Deck:
    """Draw pile plus discard pile. The top of both is the end of the list.

    An empty draw pile is refilled from a freshly generated set; discarded
    cards are never recycled.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self.draw_pile: List[Card] = []
        self.discard_pile: List[Card] = []
        self.regenerations = 0
        self.generate()
        self.shuffle()

    def generate(self) -> None:
        self.draw_pile = generate_cards()

    def shuffle(self) -> None:
        self._rng.shuffle(self.draw_pile)

    def draw(self) -> Card:
        """Remove and return the top card, regenerating the pile if empty."""
        if not self.draw_pile:
            self.generate()
            self.shuffle()
            self.regenerations += 1
            logger.debug("Draw pile empty, regenerated %d cards", len(self.draw_pile))
        return self.draw_pile.pop()

    def place(self, card: Card) -> None:
        self.discard_pile.append(card)

    def top(self) -> Card:
        if not self.discard_pile:
            raise EmptyPileError("No card on discard pile")
        return self.discard_pile[-1]

    def return_to_bottom(self, cards: Iterable[Card]) -> None:
        """Slide set-aside cards under the draw pile."""
        self.draw_pile[:0] = list(cards)

    def __len__(self) -> int:
        return len(self.draw_pile)
