"""Built-in move strategies."""

from unotable.agents.bot_agent import AutomatedStrategy
from unotable.agents.human_agent import InteractiveStrategy

__all__ = ["AutomatedStrategy", "InteractiveStrategy"]
