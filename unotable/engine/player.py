"""A seat at the table: its hand plus the strategy that plays it."""

from typing import TYPE_CHECKING, List, Optional

from unotable.engine.card import Card, CardKind, Color
from unotable.engine.deck import Deck
from unotable.engine.game_state import PlayerView
from unotable.engine.rules import (
    Action,
    DrawCard,
    PlayCard,
    can_play,
    can_stack,
    has_playable_card,
)
from unotable.errors import InvalidMoveError

if TYPE_CHECKING:
    from unotable.agent.protocol import MoveStrategy


class Player:
    """Ordered hand of cards driven by a MoveStrategy."""

    def __init__(self, name: str, strategy: "MoveStrategy"):
        self.name = name
        self.strategy = strategy
        self.hand: List[Card] = []

    @property
    def is_human(self) -> bool:
        return self.strategy.interactive

    def draw(self, deck: Deck, count: int = 1) -> List[Card]:
        drawn = [deck.draw() for _ in range(count)]
        self.hand.extend(drawn)
        return drawn

    def can_play(self, card: Card, top: Card, current_color: Optional[Color]) -> bool:
        return can_play(card, top, current_color)

    def has_playable_card(self, top: Card, current_color: Optional[Color]) -> bool:
        return has_playable_card(self.hand, top, current_color)

    def remove(self, card: Card) -> None:
        """Remove one copy of card from the hand."""
        try:
            self.hand.remove(card)
        except ValueError:
            raise InvalidMoveError(f"{self.name} does not hold {card}") from None

    def choose_move(self, view: PlayerView) -> Action:
        """Ask the strategy for a move; a played card leaves the hand."""
        action = self.strategy.choose_move(view, list(self.hand))
        if isinstance(action, DrawCard):
            return action

        card = action.card
        if not self.can_play(card, view.top_discard, view.current_color):
            raise InvalidMoveError(f"{self.name} cannot play {card} on {view.top_discard}")
        if card.is_wild:
            if action.chosen_color is None:
                raise InvalidMoveError("Wild card requires chosen_color")
            color = action.chosen_color
        else:
            color = card.color
        self.remove(card)
        return PlayCard(card=card, chosen_color=color)

    def stackable_card(self, kind: CardKind, top: Card) -> Optional[Card]:
        """First card in hand that may chain onto a pending penalty."""
        for card in self.hand:
            if can_stack(card, kind, top):
                return card
        return None

    def __repr__(self) -> str:
        return f"Player({self.name!r}, {len(self.hand)} cards)"
