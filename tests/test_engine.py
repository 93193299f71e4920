"""Unit tests for cards and the deck."""

import random
from collections import Counter

import pytest

from unotable.engine import DECK_SIZE, Card, CardKind, Color, Deck, generate_cards
from unotable.errors import EmptyPileError

from conftest import WILD, WILD4, num, skip


def test_card_equality_is_structural() -> None:
    assert num(Color.RED, 5) == Card(color=Color.RED, kind=CardKind.NUMBER, number=5)
    assert num(Color.RED, 5) != num(Color.BLUE, 5)
    assert num(Color.RED, 5) != num(Color.RED, 6)


def test_card_validation() -> None:
    with pytest.raises(ValueError):
        Card(color=Color.RED, kind=CardKind.WILD)
    with pytest.raises(ValueError):
        Card(color=None, kind=CardKind.SKIP)
    with pytest.raises(ValueError):
        Card(color=Color.RED, kind=CardKind.NUMBER, number=10)
    with pytest.raises(ValueError):
        Card(color=Color.RED, kind=CardKind.NUMBER)
    with pytest.raises(ValueError):
        Card(color=Color.RED, kind=CardKind.SKIP, number=3)


def test_card_describe() -> None:
    assert num(Color.RED, 5).describe() == "Red 5"
    assert Card(color=Color.BLUE, kind=CardKind.DRAW_TWO).describe() == "Blue Draw Two"
    assert str(skip(Color.YELLOW)) == "Yellow Skip"
    assert WILD.describe() == "Wild"
    assert WILD4.describe() == "Wild Draw Four"


def test_generate_cards_composition() -> None:
    cards = generate_cards()
    assert len(cards) == DECK_SIZE == 60
    counts = Counter(cards)
    for color in Color:
        for n in range(10):
            assert counts[num(color, n)] == 1
        for kind in (CardKind.SKIP, CardKind.REVERSE, CardKind.DRAW_TWO):
            assert counts[Card(color=color, kind=kind)] == 1
    assert counts[WILD] == 4
    assert counts[WILD4] == 4


def test_deck_shuffle_reproducible() -> None:
    d1 = Deck(random.Random(123))
    d2 = Deck(random.Random(123))
    assert d1.draw_pile == d2.draw_pile
    assert d1.draw_pile != generate_cards()
    assert Counter(d1.draw_pile) == Counter(generate_cards())


def test_draw_takes_from_end() -> None:
    deck = Deck(random.Random(1))
    expected = deck.draw_pile[-1]
    assert deck.draw() == expected
    assert len(deck) == DECK_SIZE - 1


def test_draw_on_empty_pile_regenerates() -> None:
    deck = Deck(random.Random(2))
    deck.place(num(Color.RED, 1))
    deck.draw_pile = []
    card = deck.draw()
    assert isinstance(card, Card)
    assert len(deck) == DECK_SIZE - 1
    assert deck.regenerations == 1
    # discard pile is untouched by regeneration
    assert deck.discard_pile == [num(Color.RED, 1)]


def test_top_before_place_raises() -> None:
    deck = Deck(random.Random(3))
    with pytest.raises(EmptyPileError):
        deck.top()


def test_place_and_top() -> None:
    deck = Deck(random.Random(4))
    deck.place(num(Color.RED, 1))
    deck.place(skip(Color.BLUE))
    assert deck.top() == skip(Color.BLUE)


def test_return_to_bottom() -> None:
    deck = Deck(random.Random(5))
    deck.draw_pile = [num(Color.RED, 1)]
    deck.return_to_bottom([WILD4, WILD4])
    assert deck.draw_pile == [WILD4, WILD4, num(Color.RED, 1)]
    assert deck.draw() == num(Color.RED, 1)
