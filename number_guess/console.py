import logging
import re

from pydantic import ValidationError

from number_guess.config import GameConfig
from number_guess.models import Difficulty
from number_guess.schemas import DifficultyRequest, GuessRequest, ReplayRequest
from number_guess.utils import pluralize

logger = logging.getLogger(__name__)

PROMPT_MARKER = "> "

# Plain ASCII digits with an optional sign; int() alone would also take "1_0" or "٣"
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

WELCOME_BANNER = """\
************************************************************************
*                                                                      *
*                   Welcome to Number Guessing Game!                   *
*                                                                      *
************************************************************************
"""

RULES = f"""\
- I will think of a number between {GameConfig.MIN_NUMBER} and {GameConfig.MAX_NUMBER}, and you will have to guess
  it within a limited number of attempts.
- With each failed guess, I will give you feedback on whether the number
  you said is higher or lower than the number I have thought of.
"""


class ConsoleUI:
    """
    Everything the player sees and types goes through here.

    reader(prompt) returns one line and raises EOFError once the input is
    exhausted (the builtin input() already behaves like that).
    writer(text) shows one line of text.
    """
    def __init__(self, reader=input, writer=print):
        self._reader = reader
        self._writer = writer

    # --- Low level I/O ---

    def write_line(self, text: str) -> None:
        self._writer(text)

    @property
    def closed(self) -> bool:
        return self._reader is None

    def read_line(self) -> str:
        if self._reader is None:
            raise EOFError("Console input has been released.")
        return self._reader(PROMPT_MARKER).strip()

    # --- Session messages ---

    def display_welcome(self) -> None:
        self.write_line(WELCOME_BANNER)
        self.write_line(RULES)

    def prompt_difficulty(self) -> Difficulty:
        self.write_line("Select difficulty (easy/medium/hard):")
        while True:
            selection = self.read_line()
            try:
                return DifficultyRequest(difficulty=selection).difficulty
            except ValidationError:
                logger.debug(f"Rejected difficulty input: {selection!r}")
                self.write_line("Invalid difficulty. Please type 'easy', 'medium', or 'hard':")

    def ask_to_play_again(self) -> bool:
        self.write_line("Do you want to play again? (yes/no):")
        while True:
            response = self.read_line()
            try:
                return ReplayRequest(answer=response).wants_to_play
            except ValidationError:
                logger.debug(f"Rejected replay answer: {response!r}")
                self.write_line("Invalid response. Please type 'yes' or 'no':")

    def close(self) -> None:
        self.write_line("Thank you for playing. Bye!")
        self._reader = None

    # --- Round messages ---

    def display_round_start(self, difficulty: Difficulty) -> None:
        self.write_line(
            f"Ok, I have already thought of a number between {GameConfig.MIN_NUMBER} and {GameConfig.MAX_NUMBER}.\n"
            f"Since you chose the {difficulty.value} difficulty, you have "
            f"{pluralize(difficulty.attempts, 'attempt')} to guess it.\n"
            f"Enter your guess:"
        )

    def prompt_guess(self) -> int:
        while True:
            raw_guess = self.read_line()

            if not INTEGER_PATTERN.fullmatch(raw_guess):
                logger.debug(f"Rejected non-integer guess: {raw_guess!r}")
                self.write_line("Invalid guess. Please enter a valid integer:")
                continue
            guess_value = int(raw_guess)

            try:
                return GuessRequest(guess=guess_value).guess
            except ValidationError:
                logger.debug(f"Rejected out-of-range guess: {guess_value}")
                self.write_line(
                    f"Invalid guess. Please enter a number between "
                    f"{GameConfig.MIN_NUMBER} and {GameConfig.MAX_NUMBER}:"
                )

    def display_too_high(self) -> None:
        self.write_line("Too high!")

    def display_too_low(self) -> None:
        self.write_line("Too low!")

    def display_retry(self, attempts_left: int) -> None:
        self.write_line(f"You have {pluralize(attempts_left, 'attempt')} left. Try again:")

    def display_win(self, secret_number: int, attempts_used: int, elapsed_time: str) -> None:
        self.write_line(
            f"Congratulations! It was {secret_number}! You guessed it in "
            f"{pluralize(attempts_used, 'attempt')}, and it took you {elapsed_time}."
        )

    def display_game_over(self, secret_number: int) -> None:
        self.write_line(f"Sorry, you have run out of attempts. The correct number was {secret_number}.")
