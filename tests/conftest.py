"""Shared helpers for building hand-crafted tables."""

import random
from collections import deque
from datetime import date
from typing import Optional, Sequence

import pytest

from unotable.agents.bot_agent import AutomatedStrategy
from unotable.engine import (
    AllDiscardMode,
    AwaitingMove,
    Card,
    CardKind,
    Color,
    Deck,
    Game,
    Player,
)

R, G, B, Y = Color.RED, Color.GREEN, Color.BLUE, Color.YELLOW


def num(color: Color, n: int) -> Card:
    return Card(color=color, kind=CardKind.NUMBER, number=n)


def skip(color: Color) -> Card:
    return Card(color=color, kind=CardKind.SKIP)


def reverse(color: Color) -> Card:
    return Card(color=color, kind=CardKind.REVERSE)


def draw_two(color: Color) -> Card:
    return Card(color=color, kind=CardKind.DRAW_TWO)


WILD = Card(color=None, kind=CardKind.WILD)
WILD4 = Card(color=None, kind=CardKind.WILD_DRAW_FOUR)


class ScriptedHuman:
    """Interactive stand-in that replays queued answers."""

    def __init__(self, moves=(), colors=(), stack_answers=()):
        self.moves = deque(moves)
        self.colors = deque(colors)
        self.stack_answers = deque(stack_answers)
        self.stack_offers = []

    @property
    def name(self) -> str:
        return "scripted"

    @property
    def interactive(self) -> bool:
        return True

    def choose_move(self, view, hand):
        return self.moves.popleft()

    def choose_color(self, view):
        return self.colors.popleft()

    def wants_to_stack(self, view, card, pending):
        self.stack_offers.append((card, pending))
        return self.stack_answers.popleft()


def build_table(
    hands: Sequence[Sequence[Card]],
    top: Card,
    color: Optional[Color] = None,
    human=None,
    all_discard: AllDiscardMode = AllDiscardMode.OFF,
    record=None,
    seed: int = 0,
    draw_pile: Optional[Sequence[Card]] = None,
) -> Game:
    """A game already past setup: given hands, one card on the discard pile."""
    seat0 = human if human is not None else AutomatedStrategy("You", rng=random.Random(seed))
    players = [Player("You", seat0)]
    for i in range(1, 4):
        players.append(Player(f"Bot{i}", AutomatedStrategy(f"Bot{i}", rng=random.Random(seed + i))))

    rng = random.Random(seed)
    game = Game(
        players,
        deck=Deck(rng),
        rng=rng,
        all_discard=all_discard,
        record=record,
        today=lambda: date(2026, 10, 19),
    )
    for player, hand in zip(players, hands):
        player.hand = list(hand)
    if draw_pile is not None:
        game.deck.draw_pile = list(draw_pile)
    game.deck.place(top)
    game.current_color = color if color is not None else top.color
    game.phase = AwaitingMove(0)
    return game


@pytest.fixture
def table():
    return build_table
