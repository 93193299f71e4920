"""Automated strategy - plays the first legal card in hand order."""

import random
from typing import Optional, Sequence

from unotable.engine.card import Card, Color
from unotable.engine.game_state import PlayerView
from unotable.engine.rules import Action, DrawCard, PlayCard, can_play


class AutomatedStrategy:
    """Deterministic first-match bot with random wild colors."""

    def __init__(self, name: str = "bot", rng: Optional[random.Random] = None):
        self._name = name
        self._rng = rng or random.Random()

    @property
    def name(self) -> str:
        return self._name

    @property
    def interactive(self) -> bool:
        return False

    def choose_move(self, view: PlayerView, hand: Sequence[Card]) -> Action:
        for card in hand:
            if can_play(card, view.top_discard, view.current_color):
                color = self.choose_color(view) if card.is_wild else None
                return PlayCard(card=card, chosen_color=color)
        return DrawCard()

    def choose_color(self, view: PlayerView) -> Color:
        return self._rng.choice(list(Color))

    def wants_to_stack(self, view: PlayerView, card: Card, pending: int) -> bool:
        return True
