"""Terminal rendering of cards, colors, events and table status."""

from typing import Optional

import typer

from unotable.engine.card import Card, Color
from unotable.engine.events import EventKind, GameEvent
from unotable.engine.game_state import PlayerView

COLOR_STYLES = {
    Color.RED: typer.colors.RED,
    Color.GREEN: typer.colors.GREEN,
    Color.BLUE: typer.colors.BLUE,
    Color.YELLOW: typer.colors.YELLOW,
}


def render_color(color: Optional[Color]) -> str:
    if color is None:
        return "None"
    return typer.style(color.label, fg=COLOR_STYLES[color], bold=True)


def render_card(card: Card) -> str:
    if card.color is None:
        return typer.style(card.describe(), bold=True)
    return typer.style(card.describe(), fg=COLOR_STYLES[card.color], bold=True)


def render_event(event: GameEvent) -> str:
    line = event.describe(card_fmt=render_card, color_fmt=render_color)
    if event.kind in (EventKind.GAME_WON, EventKind.UNO):
        return typer.style(line, bold=True)
    return line


def render_status(view: PlayerView) -> str:
    """Card counts with UNO markers, then top card and current color."""
    counts = []
    for seat, name in enumerate(view.player_names):
        count = view.num_cards_per_seat.get(seat, 0)
        marker = " (UNO!)" if count == 1 else ""
        counts.append(f"{name}: {count}{marker}")
    return (
        "\nCard counts: " + " | ".join(counts)
        + f"\nTop card: {render_card(view.top_discard)}"
        + f" | Current color: {render_color(view.current_color)}"
    )
