"""Tests for the interactive and automated strategies."""

import random
from collections import deque

from unotable.agents import AutomatedStrategy, InteractiveStrategy
from unotable.engine import Color, DrawCard, PlayCard, PlayerView

from conftest import B, G, R, WILD, WILD4, draw_two, num, skip


def _view(top, color):
    return PlayerView(
        seat=0,
        my_hand=[],
        top_discard=top,
        current_color=color,
        direction=1,
        pending_draws=0,
        num_cards_per_seat={0: 2, 1: 1, 2: 7, 3: 7},
        player_names=("Ann", "Bot1", "Bot2", "Bot3"),
        history=[],
    )


def _human(answers, **kwargs):
    queue = deque(answers)
    output = []
    strategy = InteractiveStrategy(
        name="Ann",
        prompt=lambda text: queue.popleft(),
        echo=output.append,
        **kwargs,
    )
    return strategy, output, queue


def test_interactive_reprompts_until_legal_card():
    human, output, queue = _human(["x", "9", "2", "1"])
    action = human.choose_move(_view(num(R, 3), R), [num(R, 5), num(G, 1)])

    assert action == PlayCard(card=num(R, 5), chosen_color=None)
    assert output.count("Invalid choice. Try again.") == 2
    assert output.count("Invalid card. Try again.") == 1
    assert not queue


def test_interactive_zero_draws():
    human, _, _ = _human(["0"])
    assert human.choose_move(_view(num(R, 3), R), [num(G, 1)]) == DrawCard()


def test_interactive_lists_hand_one_based():
    human, output, _ = _human(["0"])
    human.choose_move(_view(num(R, 3), R), [num(R, 5), skip(B)])
    assert "1. Red 5" in output
    assert "2. Blue Skip" in output
    assert "0. Draw a card" in output


def test_interactive_wild_asks_for_color_in_range():
    human, output, queue = _human(["1", "7", "-1", "2"])
    action = human.choose_move(_view(num(R, 3), R), [WILD])

    assert action == PlayCard(card=WILD, chosen_color=Color.BLUE)
    assert output.count("Invalid color. Try again.") == 2
    assert not queue


def test_interactive_stack_question():
    human, output, _ = _human(["maybe", "1"])
    assert human.wants_to_stack(_view(WILD4, R), WILD4, 4) is True
    assert "Please answer 1 or 0." in output

    human, _, _ = _human(["0"])
    assert human.wants_to_stack(_view(draw_two(R), R), draw_two(R), 2) is False


def test_interactive_shows_status_first():
    human, output, _ = _human(["0"], render_status=lambda view: f"status {view.current_color.label}")
    human.choose_move(_view(num(R, 3), R), [num(G, 1)])
    assert output[0] == "status Red"


def test_interactive_flags():
    human, _, _ = _human([])
    assert human.interactive
    assert human.name == "Ann"


def test_automated_picks_first_legal_in_hand_order():
    bot = AutomatedStrategy("Bot1", rng=random.Random(0))
    hand = [num(G, 1), num(B, 3), num(R, 9)]
    assert bot.choose_move(_view(num(R, 3), R), hand) == PlayCard(card=num(B, 3))


def test_automated_draws_without_legal_card():
    bot = AutomatedStrategy("Bot1", rng=random.Random(0))
    assert bot.choose_move(_view(num(R, 3), R), [num(G, 1), skip(B)]) == DrawCard()


def test_automated_wild_gets_a_color():
    bot = AutomatedStrategy("Bot1", rng=random.Random(0))
    action = bot.choose_move(_view(num(R, 3), G), [WILD])
    assert action.card == WILD
    assert action.chosen_color in list(Color)


def test_automated_color_choice_is_seeded():
    bot_a = AutomatedStrategy(rng=random.Random(8))
    bot_b = AutomatedStrategy(rng=random.Random(8))
    seq_a = [bot_a.choose_color(None) for _ in range(20)]
    seq_b = [bot_b.choose_color(None) for _ in range(20)]
    assert seq_a == seq_b
    assert set(seq_a) <= set(Color)


def test_automated_always_stacks():
    bot = AutomatedStrategy(rng=random.Random(0))
    assert bot.wants_to_stack(_view(WILD4, R), WILD4, 4)
    assert not bot.interactive
