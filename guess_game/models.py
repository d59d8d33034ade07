from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from guess_game.errors import GuessOutOfRange

LOWEST = 1
HIGHEST = 100


class Guess(BaseModel):
    """A player's candidate number, always within [LOWEST, HIGHEST]."""

    model_config = ConfigDict(frozen=True)

    value: StrictInt = Field(..., ge=LOWEST, le=HIGHEST)


def make_guess(value: int) -> Guess:
    """Build a Guess, turning pydantic's validation error into GuessOutOfRange."""
    try:
        return Guess(value=value)
    except ValidationError as e:
        raise GuessOutOfRange(value, LOWEST, HIGHEST) from e


class GamePhase(StrEnum):
    awaiting_input = "awaiting_input"
    reporting = "reporting"
    won = "won"


class Verdict(StrEnum):
    too_small = "too_small"
    too_big = "too_big"
    correct = "correct"


@dataclass(slots=True)
class GameState:
    secret: int
    phase: GamePhase = GamePhase.awaiting_input

    def __post_init__(self) -> None:
        if not LOWEST <= self.secret <= HIGHEST:
            raise ValueError(f"Secret must be between {LOWEST} and {HIGHEST}, got {self.secret}")
