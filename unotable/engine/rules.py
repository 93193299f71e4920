"""UNO rules: card legality, move types, stacking and the all-discard rule."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Union

from unotable.engine.card import Card, CardKind, Color


@dataclass
class PlayCard:
    """Action: play a card. For wilds, chosen_color is required."""

    card: Card
    chosen_color: Optional[Color] = None


@dataclass
class DrawCard:
    """Action: draw a card instead of playing."""

    pass


Action = Union[PlayCard, DrawCard]


class AllDiscardMode(str, Enum):
    """Variants of the optional all-discard house rule.

    COLOR_GATED only fires for colored plays. PERMISSIVE compares colors
    as-is, so a wild play also sweeps the other colorless cards.
    """

    OFF = "off"
    COLOR_GATED = "color"
    PERMISSIVE = "any"


def can_play(card: Card, top: Card, current_color: Optional[Color]) -> bool:
    """Check if a card can be played on top of the discard pile."""
    # Wild can always be played
    if card.is_wild:
        return True
    # Match by table color
    if card.color == current_color:
        return True
    # Match by action kind against the physical top card
    if card.kind == top.kind and card.kind != CardKind.NUMBER:
        return True
    # Match by digit
    if card.kind == CardKind.NUMBER and top.kind == CardKind.NUMBER:
        return card.number == top.number
    return False


def has_playable_card(
    hand: Iterable[Card], top: Card, current_color: Optional[Color]
) -> bool:
    return any(can_play(card, top, current_color) for card in hand)


def resulting_color(action: PlayCard) -> Optional[Color]:
    """Color the table takes after this play."""
    if action.card.is_wild:
        return action.chosen_color
    return action.card.color


def stack_value(kind: CardKind) -> int:
    """Penalty contributed by one Draw Two or Wild Draw Four."""
    if kind == CardKind.DRAW_TWO:
        return 2
    if kind == CardKind.WILD_DRAW_FOUR:
        return 4
    raise ValueError(f"{kind.value} carries no draw penalty")


def can_stack(card: Card, kind: CardKind, top: Card) -> bool:
    """Whether card may chain onto a pending penalty of the given kind.

    Any Wild Draw Four chains onto a Wild Draw Four; a Draw Two must also
    share the color of the card currently on top of the discard pile.
    """
    if card.kind != kind:
        return False
    if kind == CardKind.WILD_DRAW_FOUR:
        return True
    return card.color == top.color


def all_discard_matches(
    hand: Iterable[Card], played: Card, mode: AllDiscardMode
) -> List[Card]:
    """Cards swept from the hand after playing `played` under `mode`."""
    if mode == AllDiscardMode.OFF:
        return []
    if mode == AllDiscardMode.COLOR_GATED and played.color is None:
        return []
    return [card for card in hand if card.color == played.color]
