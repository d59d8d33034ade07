from __future__ import annotations


class GuessGameError(Exception):
    """Base class for every error raised by the game."""


class InvalidGuessInput(GuessGameError):
    """A line of input could not be parsed as a number. Recoverable."""


class StdinReadError(GuessGameError):
    """Reading a line from stdin failed or the stream was closed. Fatal."""

    def __init__(self, message: str = "Failed to read line") -> None:
        super().__init__(message)


class GuessOutOfRange(GuessGameError):
    """A Guess was constructed outside the allowed range. Fatal."""

    def __init__(self, value: int, lowest: int, highest: int) -> None:
        self.value = value
        super().__init__(f"Guess value must be between {lowest} and {highest}, got {value}")
