"""Move strategy interface."""

from unotable.agent.protocol import MoveStrategy

__all__ = ["MoveStrategy"]
