"""Simulate a game with a bot in every seat and print the narration."""

from unotable.agents.bot_agent import AutomatedStrategy
from unotable.engine import AllDiscardMode
from unotable.orchestration.game_runner import GameRunner


def main():
    runner = GameRunner(
        "Seat0",
        AutomatedStrategy(name="Seat0"),
        seed=42,
        all_discard=AllDiscardMode.COLOR_GATED,
        listener=lambda event: print(f"> {event.describe()}"),
        max_turns=2000,
    )
    result = runner.run()

    print(f"Game finished! Winner: {result.winner_name}")
    print(f"Turns: {result.num_turns}")


if __name__ == "__main__":
    main()
