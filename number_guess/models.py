from dataclasses import dataclass
from enum import Enum

from number_guess.config import GameConfig


class Difficulty(str, Enum):
    EASY = 'easy'
    MEDIUM = 'medium'
    HARD = 'hard'

    @property
    def attempts(self) -> int:
        return GameConfig.DIFFICULTY_SETTINGS[self.value]['max_attempts']


class RoundOutcome(Enum):
    IN_PROGRESS = 'in_progress'
    WON = 'won'
    LOST = 'lost'


class GuessFeedback(Enum):
    CORRECT = 'correct'
    TOO_HIGH = 'too_high'
    TOO_LOW = 'too_low'


class RoundFinishedError(RuntimeError):
    """Raised when a guess is registered on a round that already ended."""


@dataclass
class RoundState:
    difficulty: Difficulty
    secret_number: int
    attempts_left: int
    attempts_used: int = 0
    outcome: RoundOutcome = RoundOutcome.IN_PROGRESS

    @classmethod
    def start(cls, difficulty: Difficulty, secret_number: int) -> 'RoundState':
        return cls(difficulty=difficulty, secret_number=secret_number, attempts_left=difficulty.attempts)

    @property
    def is_over(self) -> bool:
        return self.outcome is not RoundOutcome.IN_PROGRESS

    def register_guess(self, guess: int) -> GuessFeedback:
        """
        Counts one validated guess and returns how it compares to the secret.
        A correct guess ends the round as won without spending an attempt;
        a wrong one spends it and ends the round as lost when none are left.
        """
        if self.is_over:
            raise RoundFinishedError(f"Round already finished ({self.outcome.value}).")

        self.attempts_used += 1

        if guess == self.secret_number:
            self.outcome = RoundOutcome.WON
            return GuessFeedback.CORRECT

        self.attempts_left -= 1
        if self.attempts_left <= 0:
            self.outcome = RoundOutcome.LOST

        return GuessFeedback.TOO_HIGH if guess > self.secret_number else GuessFeedback.TOO_LOW
