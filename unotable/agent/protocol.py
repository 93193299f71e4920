"""Strategy protocol - interface that interactive and automated seats implement."""

from typing import Protocol, Sequence

from unotable.engine.card import Card, Color
from unotable.engine.game_state import PlayerView
from unotable.engine.rules import Action


class MoveStrategy(Protocol):
    """Decides moves for one seat."""

    @property
    def name(self) -> str:
        """Display name for the strategy."""
        ...

    @property
    def interactive(self) -> bool:
        """True for a seat driven by a person."""
        ...

    def choose_move(self, view: PlayerView, hand: Sequence[Card]) -> Action:
        """Choose a card to play or decide to draw.

        Args:
            view: Filtered view with only this seat's hand and public info.
            hand: The seat's hand, in display order.

        Returns:
            PlayCard with a card from hand (and chosen_color for wilds),
            or DrawCard.
        """
        ...

    def choose_color(self, view: PlayerView) -> Color:
        """Pick the table color after a wild card."""
        ...

    def wants_to_stack(self, view: PlayerView, card: Card, pending: int) -> bool:
        """Whether to chain `card` onto a pending penalty of `pending` cards."""
        ...
