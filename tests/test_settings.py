from __future__ import annotations

import logging

import pytest

from guess_game.settings import settings_from_env


def test_defaults() -> None:
    s = settings_from_env()
    assert s.log_level == logging.WARNING
    assert s.seed is None


def test_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUESS_GAME_LOG_LEVEL", "debug")
    monkeypatch.setenv("GUESS_GAME_SEED", "42")
    s = settings_from_env()
    assert s.log_level == logging.DEBUG
    assert s.seed == 42


def test_rejects_bad_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GUESS_GAME_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError):
        settings_from_env()

    monkeypatch.setenv("GUESS_GAME_LOG_LEVEL", "INFO")
    monkeypatch.setenv("GUESS_GAME_SEED", "soon")
    with pytest.raises(ValueError):
        settings_from_env()
