"""Single game runner."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Callable, Optional

from unotable.agents.bot_agent import AutomatedStrategy
from unotable.engine import AllDiscardMode, Deck, Game, GameEvent, Player
from unotable.engine.game import EventListener

if TYPE_CHECKING:
    from unotable.agent.protocol import MoveStrategy
    from unotable.stats.store import PlayerRecord, StatsRepository

BOT_NAMES = ("Bot1", "Bot2", "Bot3")


@dataclass
class GameResult:
    """Result of a finished (or abandoned) game."""

    winner_seat: Optional[int]
    winner_name: Optional[str]
    num_turns: int
    events: list[GameEvent]
    record: Optional["PlayerRecord"] = None


class GameRunner:
    """Seats one human strategy against three bots and plays to the end.

    All randomness (deck, opening color, bot colors) is derived from `seed`,
    so a fixed seed and the same human answers replay the same game.
    """

    def __init__(
        self,
        player_name: str,
        human_strategy: "MoveStrategy",
        stats: Optional["StatsRepository"] = None,
        seed: Optional[int] = None,
        all_discard: AllDiscardMode = AllDiscardMode.OFF,
        listener: Optional[EventListener] = None,
        today: Callable[[], date] = date.today,
        max_turns: Optional[int] = None,
    ):
        self._name = player_name
        self._human = human_strategy
        self._stats = stats
        self._seed = seed
        self._all_discard = all_discard
        self._listener = listener
        self._today = today
        self._max_turns = max_turns
        self.game: Optional[Game] = None

    def build_game(self) -> Game:
        master = random.Random(self._seed)
        table_rng = random.Random(master.getrandbits(64))
        players = [Player(self._name, self._human)]
        for bot_name in BOT_NAMES:
            bot_rng = random.Random(master.getrandbits(64))
            players.append(Player(bot_name, AutomatedStrategy(name=bot_name, rng=bot_rng)))

        record = self._stats.load(self._name) if self._stats is not None else None
        return Game(
            players,
            deck=Deck(table_rng),
            rng=table_rng,
            all_discard=self._all_discard,
            record=record,
            today=self._today,
            listener=self._listener,
        )

    def run(self) -> GameResult:
        """Run the game, store the human's record and return the result."""
        game = self.build_game()
        self.game = game
        game.run(max_turns=self._max_turns)

        if self._stats is not None and game.record is not None:
            self._stats.save(game.record)

        winner = game.winner
        return GameResult(
            winner_seat=winner,
            winner_name=game.players[winner].name if winner is not None else None,
            num_turns=game.turns,
            events=list(game.events),
            record=game.record,
        )
