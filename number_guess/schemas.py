from typing import Literal

from pydantic import BaseModel, Field, field_validator

from number_guess.config import GameConfig
from number_guess.models import Difficulty


# A guess that already parsed as an integer still has to be inside the range
class GuessRequest(BaseModel):
    guess: int = Field(..., ge=GameConfig.MIN_NUMBER, le=GameConfig.MAX_NUMBER)


class DifficultyRequest(BaseModel):
    difficulty: Difficulty

    # Players type "Easy", " hard " and so on, so normalize before the enum lookup
    @field_validator('difficulty', mode='before')
    @classmethod
    def normalize(cls, v):
        return v.strip().lower() if isinstance(v, str) else v


class ReplayRequest(BaseModel):
    answer: Literal['yes', 'no']

    @field_validator('answer', mode='before')
    @classmethod
    def normalize(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @property
    def wants_to_play(self) -> bool:
        return self.answer == 'yes'
