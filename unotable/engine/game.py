"""Turn engine: drives four seats through a game of UNO.

The engine is a small state machine. Each call to :meth:`Game.step` performs
exactly one transition:

- ``AwaitingMove(seat)``: the seat plays a card or draws one.
- ``ResolvingStack(kind, pending, seat, examined)``: a Draw Two or Wild Draw
  Four penalty is pending and one seat is examined. It either chains a
  matching card onto the penalty (examination moves on) or absorbs the
  whole amount (the turn passes the seat after it).
- ``GameOver(winner)``: terminal.

Every change is reported as a :class:`GameEvent`, both collected on
``Game.events`` and passed to the optional listener.
"""

import logging
import random
from datetime import date
from typing import Callable, List, Optional, Sequence

from unotable.engine.card import Card, CardKind, Color
from unotable.engine.deck import Deck
from unotable.engine.events import EventKind, GameEvent
from unotable.engine.game_state import (
    AwaitingMove,
    GameOver,
    Phase,
    PlayerView,
    ResolvingStack,
)
from unotable.engine.player import Player
from unotable.engine.rules import (
    AllDiscardMode,
    DrawCard,
    all_discard_matches,
    stack_value,
)
from unotable.stats.store import PlayerRecord

logger = logging.getLogger(__name__)

NUM_SEATS = 4
HAND_SIZE = 7
HUMAN_SEAT = 0

EventListener = Callable[[GameEvent], None]


class Game:
    """One game between four seats sharing a deck."""

    def __init__(
        self,
        players: Sequence[Player],
        deck: Optional[Deck] = None,
        rng: Optional[random.Random] = None,
        all_discard: AllDiscardMode = AllDiscardMode.OFF,
        record: Optional[PlayerRecord] = None,
        today: Callable[[], date] = date.today,
        listener: Optional[EventListener] = None,
    ):
        if len(players) != NUM_SEATS:
            raise ValueError(f"A game needs exactly {NUM_SEATS} players, got {len(players)}")
        self.players: List[Player] = list(players)
        self._rng = rng or random.Random()
        self.deck = deck if deck is not None else Deck(self._rng)
        self.all_discard = all_discard
        self.record = record
        self._today = today
        self._listener = listener

        self.current_seat = HUMAN_SEAT
        self.direction = 1
        self.current_color: Optional[Color] = None
        self.phase: Optional[Phase] = None
        self.turns = 0
        self.events: List[GameEvent] = []

    # ------------------------------------------------------------------
    # Setup

    def start(self) -> None:
        """Deal hands, turn up the opening card and count the game."""
        for player in self.players:
            player.draw(self.deck, HAND_SIZE)
        self._emit(EventKind.GAME_STARTED, amount=HAND_SIZE)

        # Wild Draw Four cannot open; set aside under the pile
        set_aside: List[Card] = []
        first = self.deck.draw()
        while first.kind == CardKind.WILD_DRAW_FOUR:
            set_aside.append(first)
            first = self.deck.draw()
        self.deck.return_to_bottom(set_aside)

        if first.kind == CardKind.WILD:
            self.current_color = self._rng.choice(list(Color))
        else:
            self.current_color = first.color
        self.deck.place(first)
        self._emit(EventKind.OPENING_CARD, card=first, color=self.current_color)

        if self.record is not None:
            self.record.start_game()

        self.current_seat = HUMAN_SEAT
        self.direction = 1
        self.phase = AwaitingMove(HUMAN_SEAT)
        logger.debug("Game started, opening card %s, color %s", first, self.current_color)

    # ------------------------------------------------------------------
    # Queries

    @property
    def is_over(self) -> bool:
        return isinstance(self.phase, GameOver)

    @property
    def winner(self) -> Optional[int]:
        return self.phase.winner if isinstance(self.phase, GameOver) else None

    def next_seat(self, seat: int, steps: int = 1) -> int:
        return (seat + self.direction * steps) % NUM_SEATS

    def view(self, seat: int) -> PlayerView:
        """Public table state plus the hand of one seat."""
        pending = self.phase.pending if isinstance(self.phase, ResolvingStack) else 0
        return PlayerView(
            seat=seat,
            my_hand=list(self.players[seat].hand),
            top_discard=self.deck.top(),
            current_color=self.current_color,
            direction=self.direction,
            pending_draws=pending,
            num_cards_per_seat={i: len(p.hand) for i, p in enumerate(self.players)},
            player_names=tuple(p.name for p in self.players),
            history=[e.describe() for e in self.events[-10:]],  # Last 10 events
        )

    # ------------------------------------------------------------------
    # Transitions

    def run(self, max_turns: Optional[int] = None) -> Optional[Phase]:
        """Step until the game is over or max_turns moves were taken."""
        if self.phase is None:
            self.start()
        while not self.is_over:
            if max_turns is not None and self.turns >= max_turns:
                logger.info("Stopping after %d turns without a winner", self.turns)
                break
            self.step()
        return self.phase

    def step(self) -> Optional[Phase]:
        """Perform one transition and return the new phase."""
        phase = self.phase
        if phase is None:
            raise RuntimeError("Game has not been started")
        if isinstance(phase, AwaitingMove):
            self.turns += 1
            self._take_turn(phase.seat)
        elif isinstance(phase, ResolvingStack):
            self._resolve_stack(phase)
        return self.phase

    def _take_turn(self, seat: int) -> None:
        player = self.players[seat]
        top = self.deck.top()

        if not player.is_human and not player.has_playable_card(top, self.current_color):
            self._draw(seat, 1)
            self._emit(EventKind.CARD_DRAWN, seat=seat, amount=1)
            self._advance(seat)
            return

        action = player.choose_move(self.view(seat))
        if isinstance(action, DrawCard):
            self._draw(seat, 1)
            self._emit(EventKind.CARD_DRAWN, seat=seat, amount=1)
            self._advance(seat)
            return

        played = action.card
        self.deck.place(played)
        self.current_color = action.chosen_color
        self._emit(EventKind.CARD_PLAYED, seat=seat, card=played, color=self.current_color)

        for extra in all_discard_matches(player.hand, played, self.all_discard):
            player.remove(extra)
            self.deck.place(extra)
            self._emit(EventKind.ALL_DISCARD, seat=seat, card=extra, color=self.current_color)

        if not player.hand:
            self._finish(seat)
            return
        if len(player.hand) == 1:
            self._emit(EventKind.UNO, seat=seat)

        if played.kind == CardKind.REVERSE:
            self.direction = -self.direction
            self._emit(EventKind.DIRECTION_REVERSED, seat=seat)
            self._advance(seat)
        elif played.kind == CardKind.SKIP:
            self._emit(EventKind.TURN_SKIPPED, seat=self.next_seat(seat))
            self._advance(seat, 2)
        elif played.kind in (CardKind.DRAW_TWO, CardKind.WILD_DRAW_FOUR):
            target = self.next_seat(seat)
            pending = stack_value(played.kind)
            self._emit(EventKind.PENALTY_STARTED, seat=target, card=played, amount=pending)
            self.current_seat = target
            self.phase = ResolvingStack(
                kind=played.kind, pending=pending, seat=target, examined=frozenset({seat})
            )
        else:
            self._advance(seat)

    def _resolve_stack(self, phase: ResolvingStack) -> None:
        seat = phase.seat
        player = self.players[seat]

        card = None
        if seat not in phase.examined:
            card = player.stackable_card(phase.kind, self.deck.top())
        chains = card is not None and (
            not player.is_human
            or player.strategy.wants_to_stack(self.view(seat), card, phase.pending)
        )

        if not chains:
            self._draw(seat, phase.pending)
            self._emit(EventKind.PENALTY_DRAWN, seat=seat, amount=phase.pending)
            self._advance(seat)
            return

        player.remove(card)
        self.deck.place(card)
        pending = phase.pending + stack_value(phase.kind)
        if card.is_wild:
            self.current_color = player.strategy.choose_color(self.view(seat))
        else:
            self.current_color = card.color
        self._emit(EventKind.STACKED, seat=seat, card=card, color=self.current_color, amount=pending)

        if not player.hand:
            self._finish(seat)
            return
        if len(player.hand) == 1:
            self._emit(EventKind.UNO, seat=seat)

        target = self.next_seat(seat)
        self.current_seat = target
        self.phase = ResolvingStack(
            kind=phase.kind,
            pending=pending,
            seat=target,
            examined=phase.examined | {seat},
        )

    # ------------------------------------------------------------------
    # Helpers

    def _advance(self, seat: int, steps: int = 1) -> None:
        self.current_seat = self.next_seat(seat, steps)
        self.phase = AwaitingMove(self.current_seat)

    def _draw(self, seat: int, count: int) -> None:
        for _ in range(count):
            before = self.deck.regenerations
            self.players[seat].draw(self.deck)
            if self.deck.regenerations != before:
                self._emit(EventKind.DECK_REGENERATED)

    def _finish(self, seat: int) -> None:
        self.phase = GameOver(seat)
        self._emit(EventKind.GAME_WON, seat=seat)
        logger.info("%s won after %d turns", self.players[seat].name, self.turns)
        if self.record is not None:
            self.record.finish_game(won=seat == HUMAN_SEAT, on=self._today())

    def _emit(self, kind: EventKind, seat: Optional[int] = None, **fields) -> None:
        player = self.players[seat].name if seat is not None else None
        event = GameEvent(kind=kind, seat=seat, player=player, **fields)
        self.events.append(event)
        if self._listener is not None:
            self._listener(event)
