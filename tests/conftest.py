from __future__ import annotations

import pytest

from guess_game.fsm import GuessFSM
from guess_game.game_loop import new_game
from guess_game.models import GameState


@pytest.fixture(autouse=True)
def _clean_game_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests independent of the developer's shell configuration."""

    monkeypatch.delenv("GUESS_GAME_LOG_LEVEL", raising=False)
    monkeypatch.delenv("GUESS_GAME_SEED", raising=False)


@pytest.fixture()
def state() -> GameState:
    return new_game(secret=50)


@pytest.fixture()
def fsm(state: GameState) -> GuessFSM:
    return GuessFSM(state)
