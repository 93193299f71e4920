"""Simulation - run many bot-only games and aggregate results."""

import random
from collections import defaultdict
from typing import Optional

from unotable.agents.bot_agent import AutomatedStrategy
from unotable.engine import AllDiscardMode
from unotable.orchestration.game_runner import GameRunner

SIMULATION_MAX_TURNS = 2000


def run_simulation(
    num_games: int = 100,
    seed: Optional[int] = None,
    all_discard: AllDiscardMode = AllDiscardMode.OFF,
    max_turns: int = SIMULATION_MAX_TURNS,
) -> dict[str, int]:
    """Play num_games with a bot in the human seat too.

    No statistics are written. Games that hit max_turns count for nobody.

    Returns:
        Dict mapping seat name to number of wins.
    """
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for _ in range(num_games):
        game_seed = rng.randint(0, 2**31 - 1)
        stand_in = AutomatedStrategy(name="Seat0", rng=random.Random(game_seed))
        runner = GameRunner(
            "Seat0",
            stand_in,
            seed=game_seed,
            all_discard=all_discard,
            max_turns=max_turns,
        )
        result = runner.run()
        if result.winner_name:
            wins[result.winner_name] += 1

    return dict(wins)
