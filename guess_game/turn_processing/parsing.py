from __future__ import annotations

import re

from guess_game.errors import InvalidGuessInput

# Guesses are read into a 32-bit signed integer; anything wider is not a number.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_guess(raw: str) -> int:
    """Parse one line of input as an integer.

    Surrounding whitespace is ignored. Only an optional sign followed by ASCII
    digits is accepted, so `1_000`, `4.0` and non-ASCII digits are rejected even
    though `int()` would take some of them.
    """

    text = raw.strip()
    if not _INTEGER.fullmatch(text):
        raise InvalidGuessInput(f"Not a number: {text!r}")

    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidGuessInput(f"Number out of 32-bit range: {text!r}")
    return value
