from __future__ import annotations

import logging
import random
import sys
from collections.abc import Sequence

from guess_game.errors import GuessGameError
from guess_game.game_loop import new_game, run_game
from guess_game.settings import settings_from_env

logger = logging.getLogger(__name__)

EXIT_WIN = 0
EXIT_FATAL = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        print("usage: guess-game (takes no arguments)", file=sys.stderr)
        return EXIT_USAGE

    try:
        settings = settings_from_env()
    except ValueError as e:
        print(f"guess-game: {e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    state = new_game(rng=random.Random(settings.seed))
    try:
        run_game(state=state, stdin=sys.stdin, out=sys.stdout)
    except GuessGameError as e:
        logger.error("%s", e)
        return EXIT_FATAL
    except KeyboardInterrupt:
        return EXIT_INTERRUPTED
    return EXIT_WIN
