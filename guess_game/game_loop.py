from __future__ import annotations

import logging
import random
from typing import TextIO

from guess_game.errors import InvalidGuessInput, StdinReadError
from guess_game.fsm import GuessFSM
from guess_game.models import HIGHEST, LOWEST, GameState, Guess, Verdict, make_guess
from guess_game.turn_processing.parsing import parse_guess

logger = logging.getLogger(__name__)

VERDICT_MESSAGES: dict[Verdict, str] = {
    Verdict.too_small: "Too small!",
    Verdict.too_big: "Too big!",
    Verdict.correct: "You win!",
}


def new_game(*, rng: random.Random | None = None, secret: int | None = None) -> GameState:
    if secret is None:
        secret = (rng or random.Random()).randint(LOWEST, HIGHEST)
    return GameState(secret=secret)


def judge(guess: Guess, secret: int) -> Verdict:
    if guess.value < secret:
        return Verdict.too_small
    if guess.value > secret:
        return Verdict.too_big
    return Verdict.correct


def play_turn(*, state: GameState, fsm: GuessFSM, raw: str, out: TextIO) -> bool:
    """Process one line of input. Returns True once the game is won.

    Non-numeric input is reported and leaves the game awaiting input. A number
    outside the guess range raises GuessOutOfRange, which callers treat as fatal.
    """

    try:
        number = parse_guess(raw)
    except InvalidGuessInput as e:
        logger.debug("Rejected input: %s", e)
        print("Please input a number", file=out)
        fsm.rejected()
        fsm.sync_phase_to_model()
        return False

    guess = make_guess(number)
    fsm.guessed()
    fsm.sync_phase_to_model()

    print(f"You guessed: {guess.value}", file=out)
    verdict = judge(guess, state.secret)
    print(VERDICT_MESSAGES[verdict], file=out)

    if verdict is Verdict.correct:
        fsm.win()
    else:
        fsm.next_guess()
    fsm.sync_phase_to_model()
    logger.debug("Phase is now %s", state.phase.value)
    return verdict is Verdict.correct


def run_game(*, state: GameState, stdin: TextIO, out: TextIO) -> None:
    """Read guesses from `stdin` until one matches the secret.

    Raises StdinReadError when a read fails, when a line cannot be decoded, or
    when stdin is closed before the secret is found. A closed stream is fatal
    rather than re-prompted forever.
    """

    fsm = GuessFSM(state)

    print("Guess the number!", file=out)
    print("Please input your guess.", file=out)

    while True:
        try:
            raw = stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise StdinReadError() from e
        if raw == "":
            raise StdinReadError("Failed to read line: stdin closed")

        if play_turn(state=state, fsm=fsm, raw=raw, out=out):
            return
