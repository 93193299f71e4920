"""Name-keyed statistics records and their storage."""

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Protocol

from unotable.errors import StatsError

logger = logging.getLogger(__name__)

WIN = "win"
LOSS = "loss"


@dataclass
class HistoryEntry:
    date: str  # YYYY-MM-DD
    result: str  # "win" or "loss"


@dataclass
class PlayerRecord:
    """Games played, wins, losses and a dated result history for one name."""

    name: str
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    history: List[HistoryEntry] = field(default_factory=list)

    def start_game(self) -> None:
        self.games_played += 1

    def finish_game(self, won: bool, on: date) -> None:
        if won:
            self.wins += 1
        else:
            self.losses += 1
        self.history.append(HistoryEntry(date=on.isoformat(), result=WIN if won else LOSS))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "played_games": self.games_played,
            "wins": self.wins,
            "losses": self.losses,
            "history": [{"date": h.date, "result": h.result} for h in self.history],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerRecord":
        try:
            return cls(
                name=data["name"],
                games_played=int(data.get("played_games", 0)),
                wins=int(data.get("wins", 0)),
                losses=int(data.get("losses", 0)),
                history=[
                    HistoryEntry(date=h["date"], result=h["result"])
                    for h in data.get("history", [])
                ],
            )
        except (KeyError, TypeError, ValueError) as e:
            raise StatsError(f"Malformed player record: {e}") from e


class StatsRepository(Protocol):
    """Storage for player records."""

    def load(self, name: str) -> PlayerRecord:
        """Return the record for name, or a fresh zeroed one."""
        ...

    def save(self, record: PlayerRecord) -> None:
        ...


class InMemoryStatsRepository:
    """Dict-backed store for tests and simulations."""

    def __init__(self) -> None:
        self.records: Dict[str, PlayerRecord] = {}

    def load(self, name: str) -> PlayerRecord:
        stored = self.records.get(name)
        if stored is None:
            return PlayerRecord(name=name)
        return PlayerRecord.from_dict(stored.to_dict())

    def save(self, record: PlayerRecord) -> None:
        self.records[record.name] = PlayerRecord.from_dict(record.to_dict())


class JsonStatsRepository:
    """All records in one JSON object keyed by player name."""

    def __init__(self, path: Path | str = "player_stats.json"):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, json.JSONDecodeError) as e:
            raise StatsError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StatsError(f"{self.path} does not hold a JSON object")
        return data

    def load(self, name: str) -> PlayerRecord:
        data = self._read_all()
        if name not in data:
            logger.debug("No stats for %s in %s, starting fresh", name, self.path)
            return PlayerRecord(name=name)
        return PlayerRecord.from_dict(data[name])

    def save(self, record: PlayerRecord) -> None:
        data = self._read_all()
        data[record.name] = record.to_dict()
        try:
            self.path.write_text(json.dumps(data, indent=4), encoding="utf-8")
        except OSError as e:
            raise StatsError(f"Cannot write {self.path}: {e}") from e
        logger.info("Saved stats for %s to %s", record.name, self.path)
