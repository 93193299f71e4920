"""Card, Color and Kind types for UNO."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors, in the 0-3 order used for color choice."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class CardKind(str, Enum):
    """What a card does when played."""

    NUMBER = "number"
    SKIP = "skip"
    REVERSE = "reverse"
    DRAW_TWO = "draw_two"
    WILD = "wild"
    WILD_DRAW_FOUR = "wild_draw_four"


WILD_KINDS = (CardKind.WILD, CardKind.WILD_DRAW_FOUR)
ACTION_KINDS = (CardKind.SKIP, CardKind.REVERSE, CardKind.DRAW_TWO)

_KIND_LABELS = {
    CardKind.SKIP: "Skip",
    CardKind.REVERSE: "Reverse",
    CardKind.DRAW_TWO: "Draw Two",
    CardKind.WILD: "Wild",
    CardKind.WILD_DRAW_FOUR: "Wild Draw Four",
}


@dataclass(frozen=True)
class Card:
    """A UNO card.

    Number cards carry a color and a digit 0-9. Skip, Reverse and Draw Two
    carry a color only. Wild and Wild Draw Four have color=None; the color
    chosen when they are played lives on the table, not on the card.
    """

    color: Optional[Color]
    kind: CardKind
    number: Optional[int] = None

    def __post_init__(self) -> None:
        if self.kind in WILD_KINDS:
            if self.color is not None:
                raise ValueError("Wild cards must have color=None")
        elif self.color is None:
            raise ValueError("Non-wild cards must have a color")
        if self.kind == CardKind.NUMBER:
            if self.number is None or not 0 <= self.number <= 9:
                raise ValueError(f"Invalid card number: {self.number}")
        elif self.number is not None:
            raise ValueError(f"{self.kind.value} cards carry no number")

    @property
    def is_wild(self) -> bool:
        return self.kind in WILD_KINDS

    def describe(self) -> str:
        """Human-readable name, e.g. 'Red 5' or 'Wild Draw Four'."""
        if self.color is None:
            return _KIND_LABELS[self.kind]
        if self.kind == CardKind.NUMBER:
            return f"{self.color.label} {self.number}"
        return f"{self.color.label} {_KIND_LABELS[self.kind]}"

    def __str__(self) -> str:
        return self.describe()
