import pytest

from number_guess.console import ConsoleUI
from number_guess.game import Game
from number_guess.utils import Stopwatch


class ScriptedInput:
    """
    Plays the part of the keyboard: hands out the prepared lines one by one
    and raises EOFError when they run out, just like input() does.
    """
    def __init__(self, lines=()):
        self.lines = list(lines)
        self.prompts = []

    def feed(self, *lines):
        self.lines.extend(lines)

    def __call__(self, prompt=''):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class CapturedOutput:
    def __init__(self):
        self.lines = []

    def __call__(self, text=''):
        self.lines.append(text)

    @property
    def text(self):
        return "\n".join(self.lines)

    def count(self, message):
        return sum(line.count(message) for line in self.lines)


class FixedRandom:
    """Returns the queued secret numbers in order instead of random ones."""
    def __init__(self, *numbers):
        self.numbers = list(numbers)
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.numbers.pop(0)


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def advance(self, seconds):
        self.now += seconds

    def __call__(self):
        return self.now


@pytest.fixture
def player_input():
    return ScriptedInput()


@pytest.fixture
def output():
    return CapturedOutput()


@pytest.fixture
def ui(player_input, output):
    return ConsoleUI(reader=player_input, writer=output)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_game(ui, clock):
    # Build a game whose secret numbers are known in advance
    def _make_game(*secret_numbers):
        return Game(ui=ui, rng=FixedRandom(*secret_numbers), stopwatch=Stopwatch(clock=clock))
    return _make_game
