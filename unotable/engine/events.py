"""Structured game events consumed by presentation layers."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from unotable.engine.card import Card, Color


class EventKind(str, Enum):
    GAME_STARTED = "game_started"
    OPENING_CARD = "opening_card"
    CARD_PLAYED = "card_played"
    CARD_DRAWN = "card_drawn"
    DECK_REGENERATED = "deck_regenerated"
    ALL_DISCARD = "all_discard"
    DIRECTION_REVERSED = "direction_reversed"
    TURN_SKIPPED = "turn_skipped"
    PENALTY_STARTED = "penalty_started"
    STACKED = "stacked"
    PENALTY_DRAWN = "penalty_drawn"
    UNO = "uno"
    GAME_WON = "game_won"


def _plain_color(color: Optional[Color]) -> str:
    return color.label if color is not None else "None"


@dataclass(frozen=True)
class GameEvent:
    """One state change.

    `seat`/`player` identify who acted (None for table-level events),
    `color` is the table color after the change and `amount` a card count
    or penalty total where one applies.
    """

    kind: EventKind
    seat: Optional[int] = None
    player: Optional[str] = None
    card: Optional[Card] = None
    color: Optional[Color] = None
    amount: Optional[int] = None

    def describe(
        self,
        card_fmt: Callable[[Card], str] = str,
        color_fmt: Callable[[Optional[Color]], str] = _plain_color,
    ) -> str:
        """Narration line; formatters let a terminal add colors."""
        who = self.player or "Table"
        card = card_fmt(self.card) if self.card is not None else ""
        color = color_fmt(self.color)

        if self.kind == EventKind.GAME_STARTED:
            return f"Game started with {self.amount} cards dealt to each player"
        if self.kind == EventKind.OPENING_CARD:
            return f"Opening card: {card} (color {color})"
        if self.kind == EventKind.CARD_PLAYED:
            if self.card is not None and self.card.is_wild:
                return f"{who} plays {card} and chooses {color}"
            return f"{who} plays {card}"
        if self.kind == EventKind.CARD_DRAWN:
            return f"{who} draws a card"
        if self.kind == EventKind.DECK_REGENERATED:
            return "Draw pile was empty: a fresh deck was shuffled in"
        if self.kind == EventKind.ALL_DISCARD:
            return f"-> {who} also discards {card} (All Discard)"
        if self.kind == EventKind.DIRECTION_REVERSED:
            return "Direction reversed"
        if self.kind == EventKind.TURN_SKIPPED:
            return f"{who} is skipped"
        if self.kind == EventKind.PENALTY_STARTED:
            return f"{who} is hit with a {self.amount} card penalty"
        if self.kind == EventKind.STACKED:
            text = f"{who} plays {card} (stack), penalty is now {self.amount}"
            if self.card is not None and self.card.is_wild:
                text += f", color {color}"
            return text
        if self.kind == EventKind.PENALTY_DRAWN:
            return f"{who} must draw {self.amount} cards"
        if self.kind == EventKind.UNO:
            return f"{who}: UNO!"
        if self.kind == EventKind.GAME_WON:
            return f"{who} wins the game!"
        return f"{who}: {self.kind.value}"
