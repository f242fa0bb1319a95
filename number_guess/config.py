import os
from dataclasses import dataclass


class GameConfig:
    MIN_NUMBER = 1
    MAX_NUMBER = 100

    DIFFICULTY_SETTINGS = {
        'easy':   {'max_attempts': 8},
        'medium': {'max_attempts': 6},
        'hard':   {'max_attempts': 4},
    }


# Ambient settings only (logging and the random seed).
# Nothing here changes the rules of the game.
@dataclass(frozen=True)
class Settings:
    log_level: str = 'WARNING'
    log_file: str | None = None
    seed: int | None = None

    @classmethod
    def from_env(cls) -> 'Settings':
        return cls(
            log_level=os.environ.get('GUESS_LOG_LEVEL', 'WARNING').upper(),
            log_file=os.environ.get('GUESS_LOG_FILE') or None,
            seed=_parse_seed(os.environ.get('GUESS_SEED')),
        )


def _parse_seed(raw_value: str | None) -> int | None:
    if not raw_value:
        return None
    try:
        return int(raw_value)
    except ValueError:
        # create_game() warns about it once logging is configured
        return None
