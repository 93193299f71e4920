"""Turn-engine phases and the per-seat view handed to strategies."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Union

from unotable.engine.card import Card, CardKind, Color


@dataclass(frozen=True)
class AwaitingMove:
    """The seat is about to play or draw."""

    seat: int


@dataclass(frozen=True)
class ResolvingStack:
    """A draw penalty is pending and `seat` is being examined.

    `examined` holds every seat that already had its chance in this
    resolution, starting with the seat that played the penalty card.
    """

    kind: CardKind
    pending: int
    seat: int
    examined: FrozenSet[int] = field(default_factory=frozenset)


@dataclass(frozen=True)
class GameOver:
    winner: int


Phase = Union[AwaitingMove, ResolvingStack, GameOver]


@dataclass
class PlayerView:
    """Table state visible to a single seat.

    Contains only that seat's hand and public info.
    """

    seat: int
    my_hand: List[Card]
    top_discard: Card
    current_color: Optional[Color]
    direction: int
    pending_draws: int
    num_cards_per_seat: Dict[int, int]  # seat -> count
    player_names: tuple[str, ...]
    history: List[str]  # Recent game events
