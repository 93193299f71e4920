"""Settings read from the environment (and a .env file via the CLI)."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from unotable.engine.rules import AllDiscardMode
from unotable.errors import ConfigError

DEFAULT_STATS_FILE = "player_stats.json"


@dataclass
class Settings:
    stats_file: str = DEFAULT_STATS_FILE
    all_discard: Optional[AllDiscardMode] = None  # None = ask at startup
    seed: Optional[int] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        all_discard = None
        raw_mode = env.get("UNO_ALL_DISCARD", "").strip().lower()
        if raw_mode:
            try:
                all_discard = AllDiscardMode(raw_mode)
            except ValueError:
                choices = ", ".join(m.value for m in AllDiscardMode)
                raise ConfigError(f"UNO_ALL_DISCARD must be one of {choices}, got {raw_mode!r}") from None

        seed = None
        raw_seed = env.get("UNO_SEED", "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise ConfigError(f"UNO_SEED must be an integer, got {raw_seed!r}") from None

        return cls(
            stats_file=env.get("UNO_STATS_FILE", "").strip() or DEFAULT_STATS_FILE,
            all_discard=all_discard,
            seed=seed,
        )
