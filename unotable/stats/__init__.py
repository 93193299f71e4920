"""Persisted per-player statistics."""

from unotable.stats.store import (
    HistoryEntry,
    InMemoryStatsRepository,
    JsonStatsRepository,
    PlayerRecord,
    StatsRepository,
)

__all__ = [
    "HistoryEntry",
    "InMemoryStatsRepository",
    "JsonStatsRepository",
    "PlayerRecord",
    "StatsRepository",
]
