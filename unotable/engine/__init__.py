"""Game engine for UNO."""

from unotable.engine.card import Card, CardKind, Color
from unotable.engine.deck import DECK_SIZE, Deck, generate_cards
from unotable.engine.events import EventKind, GameEvent
from unotable.engine.game_state import (
    AwaitingMove,
    GameOver,
    Phase,
    PlayerView,
    ResolvingStack,
)
from unotable.engine.rules import (
    Action,
    AllDiscardMode,
    DrawCard,
    PlayCard,
    all_discard_matches,
    can_play,
    can_stack,
    has_playable_card,
)
from unotable.engine.player import Player
from unotable.engine.game import HUMAN_SEAT, NUM_SEATS, Game

__all__ = [
    "Card",
    "CardKind",
    "Color",
    "DECK_SIZE",
    "Deck",
    "generate_cards",
    "EventKind",
    "GameEvent",
    "AwaitingMove",
    "GameOver",
    "Phase",
    "PlayerView",
    "ResolvingStack",
    "Action",
    "AllDiscardMode",
    "DrawCard",
    "PlayCard",
    "all_discard_matches",
    "can_play",
    "can_stack",
    "has_playable_card",
    "Player",
    "HUMAN_SEAT",
    "NUM_SEATS",
    "Game",
]
