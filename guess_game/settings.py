from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: int
    seed: int | None


def settings_from_env() -> Settings:
    level_name = os.environ.get("GUESS_GAME_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelNamesMapping().get(level_name)
    if level is None:
        raise ValueError(f"Unknown GUESS_GAME_LOG_LEVEL: {level_name!r}")

    raw_seed = os.environ.get("GUESS_GAME_SEED")
    seed: int | None = None
    if raw_seed is not None and raw_seed.strip():
        try:
            seed = int(raw_seed)
        except ValueError:
            raise ValueError(f"GUESS_GAME_SEED must be an integer, got {raw_seed!r}") from None

    return Settings(log_level=level, seed=seed)
