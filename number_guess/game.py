import logging
import random

from number_guess.config import GameConfig
from number_guess.console import ConsoleUI
from number_guess.models import Difficulty, GuessFeedback, RoundOutcome, RoundState
from number_guess.utils import Stopwatch

logger = logging.getLogger(__name__)


class Game:
    """
    Runs the replay loop and the individual rounds.

    rng only needs a randint(a, b) method, so a seeded random.Random works
    for reproducible sessions and tests.
    """
    def __init__(self, ui: ConsoleUI, rng=None, stopwatch: Stopwatch | None = None):
        self.ui = ui
        self.rng = rng or random.Random()
        self.stopwatch = stopwatch or Stopwatch()

    def run(self) -> None:
        self.ui.display_welcome()
        logger.info("Session started")

        rounds_played = 0
        wants_to_play = True
        while wants_to_play:
            difficulty = self.ui.prompt_difficulty()
            self.play_round(difficulty)
            rounds_played += 1
            wants_to_play = self.ui.ask_to_play_again()

        self.ui.close()
        logger.info(f"Session finished after {rounds_played} round(s)")

    def play_round(self, difficulty: Difficulty) -> RoundOutcome:
        secret_number = self.rng.randint(GameConfig.MIN_NUMBER, GameConfig.MAX_NUMBER)
        state = RoundState.start(difficulty, secret_number)
        self.stopwatch.start()

        logger.info(f"Round started on {difficulty.value} with {difficulty.attempts} attempts")
        logger.debug(f"Secret number is {secret_number}")
        self.ui.display_round_start(difficulty)

        while not state.is_over:
            guess_value = self.ui.prompt_guess()
            feedback = state.register_guess(guess_value)

            if feedback is GuessFeedback.CORRECT:
                self.ui.display_win(secret_number, state.attempts_used, self.stopwatch.elapsed_formatted())
                break

            if feedback is GuessFeedback.TOO_HIGH:
                self.ui.display_too_high()
            else:
                self.ui.display_too_low()

            if state.attempts_left > 0:
                self.ui.display_retry(state.attempts_left)
            else:
                self.ui.display_game_over(secret_number)

        logger.info(f"Round {state.outcome.value} after {state.attempts_used} attempt(s)")
        return state.outcome
