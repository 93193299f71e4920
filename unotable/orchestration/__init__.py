"""Game orchestration."""

from unotable.orchestration.game_runner import GameResult, GameRunner
from unotable.orchestration.tournament import run_simulation

__all__ = ["GameResult", "GameRunner", "run_simulation"]
