from __future__ import annotations

from statemachine import State, StateMachine

from guess_game.models import GamePhase, GameState


class GuessFSM(StateMachine):
    """Tracks where a guessing game is between reading a line and reporting on it.

    Unparseable input loops on awaiting_input; each number moves to reporting,
    which returns to awaiting_input on a miss and ends in won on a hit.
    """

    awaiting_input = State(
        GamePhase.awaiting_input.value,
        value=GamePhase.awaiting_input.value,
        initial=True,
    )
    reporting = State(GamePhase.reporting.value, value=GamePhase.reporting.value)
    won = State(GamePhase.won.value, value=GamePhase.won.value, final=True)

    guessed = awaiting_input.to(reporting)
    rejected = awaiting_input.to.itself()
    next_guess = reporting.to(awaiting_input)
    win = reporting.to(won)

    def __init__(self, game: GameState):
        self.game = game
        super().__init__(start_value=game.phase.value)

    def sync_phase_to_model(self) -> None:
        self.game.phase = GamePhase(str(self.current_state.value))
