"""Interactive strategy - reads moves from the terminal."""

from typing import Callable, Optional, Sequence

import typer

from unotable.engine.card import Card, Color
from unotable.engine.game_state import PlayerView
from unotable.engine.rules import Action, DrawCard, PlayCard, can_play

COLOR_CHOICES = list(Color)


def _typer_prompt(text: str) -> str:
    return typer.prompt(text, prompt_suffix=" ")


class InteractiveStrategy:
    """Strategy that prompts a person for every decision.

    Bad input is answered with a message and the question is asked again;
    nothing here raises on a wrong answer.
    """

    def __init__(
        self,
        name: str = "human",
        prompt: Optional[Callable[[str], str]] = None,
        echo: Optional[Callable[[str], None]] = None,
        render_card: Callable[[Card], str] = str,
        render_status: Optional[Callable[[PlayerView], str]] = None,
    ):
        self._name = name
        self._prompt = prompt or _typer_prompt
        self._echo = echo or typer.echo
        self._render = render_card
        self._render_status = render_status

    @property
    def name(self) -> str:
        return self._name

    @property
    def interactive(self) -> bool:
        return True

    def _ask_int(self, text: str) -> Optional[int]:
        raw = self._prompt(text).strip()
        try:
            return int(raw)
        except ValueError:
            return None

    def choose_move(self, view: PlayerView, hand: Sequence[Card]) -> Action:
        if self._render_status is not None:
            self._echo(self._render_status(view))
        while True:
            self._echo("\nYour hand:")
            for i, card in enumerate(hand, start=1):
                self._echo(f"{i}. {self._render(card)}")
            self._echo("0. Draw a card")

            choice = self._ask_int("Choose:")
            if choice == 0:
                return DrawCard()
            if choice is None or not 1 <= choice <= len(hand):
                self._echo("Invalid choice. Try again.")
                continue

            selected = hand[choice - 1]
            if not can_play(selected, view.top_discard, view.current_color):
                self._echo("Invalid card. Try again.")
                continue
            color = self.choose_color(view) if selected.is_wild else None
            return PlayCard(card=selected, chosen_color=color)

    def choose_color(self, view: PlayerView) -> Color:
        options = ", ".join(f"{i}={c.label}" for i, c in enumerate(COLOR_CHOICES))
        while True:
            choice = self._ask_int(f"Choose color ({options}):")
            if choice is not None and 0 <= choice < len(COLOR_CHOICES):
                return COLOR_CHOICES[choice]
            self._echo("Invalid color. Try again.")

    def wants_to_stack(self, view: PlayerView, card: Card, pending: int) -> bool:
        self._echo(
            f"You are penalized with {pending} cards. "
            f"You have a matching card: {self._render(card)}."
        )
        while True:
            choice = self._ask_int("Do you want to stack it? (1 = Yes, 0 = No):")
            if choice in (0, 1):
                return choice == 1
            self._echo("Please answer 1 or 0.")
